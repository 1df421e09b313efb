from __future__ import annotations

from airline.booking.domain.enum import BookingStatus
from airline.booking.domain.value_object import BookingId
from airline.flight.domain.value_object import FlightId
from airline.shared.domain import Entity


class Booking(Entity[BookingId]):
    """フライト予約

    不変のスナップショットとして扱う。
    ステータスの変更は with_status() で新しいスナップショットを作り、
    Ledger 側で差し替える。
    """

    def __init__(
        self,
        id: BookingId,
        flight_id: FlightId,
        passenger_name: str,
        status: BookingStatus = BookingStatus.PENDING,
    ) -> None:
        super().__init__(id)

        self._flight_id = flight_id
        self._passenger_name = passenger_name
        self._status = status

    @property
    def flight_id(self) -> FlightId:
        return self._flight_id

    @property
    def passenger_name(self) -> str:
        return self._passenger_name

    @property
    def status(self) -> BookingStatus:
        return self._status

    def with_status(self, status: BookingStatus) -> Booking:
        """ステータスだけを差し替えたスナップショットを返す"""
        return Booking(
            id=self.id,
            flight_id=self._flight_id,
            passenger_name=self._passenger_name,
            status=status,
        )

    def __repr__(self) -> str:
        return (
            f"Booking(id={self.id}, flight_id={self._flight_id}, "
            f"status={self._status.value})"
        )
