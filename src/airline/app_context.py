from __future__ import annotations

from dataclasses import dataclass

from airline.booking.applications.cancel_booking import CancelBookingService
from airline.booking.applications.confirm_booking import ConfirmBookingService
from airline.booking.applications.create_booking import CreateBookingService
from airline.booking.applications.get_booking import GetBookingService
from airline.booking.domain.policy import (
    FailurePolicy,
    RandomFailurePolicy,
    TransitionTable,
)
from airline.booking.infrastructure import InMemoryBookingLedger
from airline.flight.applications.search_flights import SearchFlightsService
from airline.flight.domain.repository import FlightCatalog
from airline.flight.infrastructure import InMemoryFlightCatalog
from airline.shared.settings import Settings


@dataclass(frozen=True)
class AppContext:
    """プロセス全体で共有するユースケース

    コールドスタート時に一度だけ構築し、ハンドラへ明示的に渡す。
    各ユースケースは同じカタログ・台帳・遷移表・障害ポリシーを共有する。
    """

    search_flights: SearchFlightsService
    create_booking: CreateBookingService
    get_booking: GetBookingService
    confirm_booking: ConfirmBookingService
    cancel_booking: CancelBookingService

    @classmethod
    def create(
        cls,
        settings: Settings,
        catalog: FlightCatalog | None = None,
        failure_policy: FailurePolicy | None = None,
    ) -> AppContext:
        """設定からストアとユースケースを組み立てる"""
        catalog = catalog or InMemoryFlightCatalog.from_seed()
        transitions = TransitionTable.for_settings(settings.allow_cancel_confirmed)
        ledger = InMemoryBookingLedger(transitions=transitions)
        failure_policy = failure_policy or RandomFailurePolicy(
            rate=settings.failure_rate
        )

        return cls(
            search_flights=SearchFlightsService(catalog),
            create_booking=CreateBookingService(ledger, catalog),
            get_booking=GetBookingService(ledger),
            confirm_booking=ConfirmBookingService(ledger, transitions, failure_policy),
            cancel_booking=CancelBookingService(ledger, transitions, failure_policy),
        )
