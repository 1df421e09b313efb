from pydantic import BaseModel

from airline.flight.domain.entity import Flight


class FlightData(BaseModel):
    """フライトのレスポンスモデル"""

    id: str
    origin: str
    destination: str
    date: str
    price: str


def to_flight_data(flight: Flight) -> dict:
    """Flight エンティティをレスポンス辞書に変換する"""
    return FlightData(
        id=str(flight.id),
        origin=str(flight.origin),
        destination=str(flight.destination),
        date=flight.date.isoformat(),
        price=str(flight.price),
    ).model_dump()
