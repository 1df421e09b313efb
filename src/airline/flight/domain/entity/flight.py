import datetime
from decimal import Decimal

from airline.flight.domain.value_object import AirportCode, FlightId
from airline.shared.domain import Entity
from airline.shared.domain.exception import BusinessRuleViolationException


class Flight(Entity[FlightId]):
    """フライト

    起動時に一度だけ生成され、以降は変更されない。
    """

    def __init__(
        self,
        id: FlightId,
        origin: AirportCode,
        destination: AirportCode,
        date: datetime.date,
        price: Decimal,
    ) -> None:
        super().__init__(id)

        self._origin = origin
        self._destination = destination
        self._date = date
        self._price = price

        self._validate_price()

    def _validate_price(self) -> None:
        """料金 > 0"""
        if self._price <= 0:
            raise BusinessRuleViolationException("Flight price must be positive")

    @property
    def origin(self) -> AirportCode:
        return self._origin

    @property
    def destination(self) -> AirportCode:
        return self._destination

    @property
    def date(self) -> datetime.date:
        return self._date

    @property
    def price(self) -> Decimal:
        return self._price

    def matches(self, origin: str, destination: str, on: datetime.date) -> bool:
        """出発地・到着地（大文字小文字を区別しない）と日付が一致するか"""
        return (
            self._origin.matches(origin)
            and self._destination.matches(destination)
            and self._date == on
        )
