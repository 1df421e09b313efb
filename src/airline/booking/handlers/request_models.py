from pydantic import BaseModel, Field


class CreateBookingRequest(BaseModel):
    """予約作成リクエストスキーマ

    passenger_name の内容は検証しない。
    """

    flight_id: str = Field(
        ...,
        min_length=1,
        description="フライトID",
        examples=["3f1c6a52-8d2e-4a3b-9f1e-2b7c9d0e4a11"],
    )

    passenger_name: str = Field(
        ...,
        description="搭乗者名",
        examples=["Maria Silva"],
    )
