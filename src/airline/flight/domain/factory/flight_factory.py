import datetime
from decimal import Decimal
from typing import TypedDict

from airline.flight.domain.entity import Flight
from airline.flight.domain.value_object import AirportCode, FlightId


class FlightDetails(TypedDict):
    """フライト詳細の入力データ構造"""

    origin: str
    destination: str
    date: datetime.date
    price: Decimal


class FlightFactory:
    """フライトエンティティのファクトリ

    - ID の採番
    - プリミティブ型から Value Object への変換
    """

    def create(self, flight_details: FlightDetails) -> Flight:
        """新規フライトエンティティを生成する"""
        return Flight(
            id=FlightId.generate(),
            origin=AirportCode(flight_details["origin"]),
            destination=AirportCode(flight_details["destination"]),
            date=flight_details["date"],
            price=flight_details["price"],
        )
