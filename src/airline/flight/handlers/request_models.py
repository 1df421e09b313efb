import datetime
import re

from pydantic import BaseModel, ConfigDict, Field, field_validator


_ISO_DATE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


class SearchFlightsQuery(BaseModel):
    """フライト検索クエリ

    クエリ文字列は from / to / date。
    """

    model_config = ConfigDict(populate_by_name=True)

    origin: str = Field(
        ...,
        alias="from",
        min_length=1,
        description="出発地の空港コード",
        examples=["OPO"],
    )

    destination: str = Field(
        ...,
        alias="to",
        min_length=1,
        description="到着地の空港コード",
        examples=["LIS"],
    )

    date: datetime.date = Field(
        ...,
        description="出発日（yyyy-MM-dd）",
        examples=["2026-03-01"],
    )

    @field_validator("date", mode="before")
    @classmethod
    def parse_iso_date(cls, v):
        """yyyy-MM-dd 形式の日付のみ受け付ける"""
        if isinstance(v, datetime.date):
            return v
        if not _ISO_DATE.fullmatch(str(v)):
            raise ValueError("Invalid date format. Use yyyy-MM-dd.")
        try:
            return datetime.datetime.strptime(str(v), "%Y-%m-%d").date()
        except ValueError as e:
            raise ValueError("Invalid date format. Use yyyy-MM-dd.") from e
