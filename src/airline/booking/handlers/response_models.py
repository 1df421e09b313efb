from pydantic import BaseModel

from airline.booking.domain.entity import Booking


class BookingData(BaseModel):
    """予約データのレスポンスモデル"""

    id: str
    flight_id: str
    passenger_name: str
    status: str


def to_booking_data(booking: Booking) -> dict:
    """Booking エンティティをレスポンス辞書に変換する"""
    return BookingData(
        id=str(booking.id),
        flight_id=str(booking.flight_id),
        passenger_name=booking.passenger_name,
        status=booking.status.value,
    ).model_dump()
