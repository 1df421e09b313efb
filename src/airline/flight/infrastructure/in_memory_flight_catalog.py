from __future__ import annotations

from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from airline.flight.domain.entity import Flight
from airline.flight.domain.factory import FlightDetails, FlightFactory
from airline.flight.domain.repository import FlightCatalog
from airline.flight.domain.value_object import FlightId

SEED_FLIGHTS: tuple[FlightDetails, ...] = (
    {"origin": "OPO", "destination": "LIS", "date": date(2026, 3, 1), "price": Decimal("49.99")},
    {"origin": "OPO", "destination": "LIS", "date": date(2026, 3, 2), "price": Decimal("59.99")},
    {"origin": "LIS", "destination": "OPO", "date": date(2026, 3, 1), "price": Decimal("45.00")},
    {"origin": "LIS", "destination": "FAO", "date": date(2026, 3, 1), "price": Decimal("39.99")},
    {"origin": "OPO", "destination": "FAO", "date": date(2026, 3, 3), "price": Decimal("69.99")},
    {"origin": "FAO", "destination": "LIS", "date": date(2026, 3, 1), "price": Decimal("35.00")},
    {"origin": "LIS", "destination": "MAD", "date": date(2026, 3, 1), "price": Decimal("89.99")},
    {"origin": "OPO", "destination": "MAD", "date": date(2026, 3, 2), "price": Decimal("99.99")},
)  # fmt: skip


class InMemoryFlightCatalog(FlightCatalog):
    """メモリ上に保持する FlightCatalog の具象実装

    コンストラクタで全件を構築してから公開するため、
    途中まで登録された状態が観測されることはない。
    生成後は読み取り専用なのでロックは不要。
    """

    def __init__(self, flights: Iterable[Flight]) -> None:
        self._flights: tuple[Flight, ...] = tuple(flights)
        self._by_id: dict[FlightId, Flight] = {f.id: f for f in self._flights}

    @classmethod
    def from_seed(
        cls,
        seed: Iterable[FlightDetails] = SEED_FLIGHTS,
        factory: FlightFactory | None = None,
    ) -> InMemoryFlightCatalog:
        """シードデータからカタログを構築する"""
        factory = factory or FlightFactory()
        return cls(factory.create(details) for details in seed)

    def find_by_id(self, flight_id: FlightId) -> Flight | None:
        return self._by_id.get(flight_id)

    def search(self, origin: str, destination: str, on: date) -> list[Flight]:
        return [f for f in self._flights if f.matches(origin, destination, on)]
