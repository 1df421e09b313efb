import threading

from airline.booking.domain.entity import Booking
from airline.booking.domain.enum import BookingStatus
from airline.booking.domain.policy import TransitionTable
from airline.booking.domain.repository import BookingLedger
from airline.booking.domain.value_object import BookingId
from airline.flight.domain.value_object import FlightId

DEFAULT_STRIPES = 16


class InMemoryBookingLedger(BookingLedger):
    """メモリ上に保持する BookingLedger の具象実装

    予約IDのハッシュでロックをストライプ分割する。
    同じ予約への操作は同じロックで直列化され、
    異なる予約への操作は（ストライプが異なれば）互いにブロックしない。

    transitions を指定すると、try_transition は遷移表に無い遷移を拒否する。
    指定しない場合は現在のステータスに関係なく上書きする。
    """

    def __init__(
        self,
        transitions: TransitionTable | None = None,
        stripes: int = DEFAULT_STRIPES,
    ) -> None:
        if stripes < 1:
            raise ValueError(f"stripes must be positive: {stripes}")
        self._transitions = transitions
        self._bookings: dict[BookingId, Booking] = {}
        self._locks = tuple(threading.Lock() for _ in range(stripes))

    def _lock_for(self, booking_id: BookingId) -> threading.Lock:
        return self._locks[hash(booking_id) % len(self._locks)]

    def create(self, flight_id: FlightId, passenger_name: str) -> Booking:
        booking = Booking(
            id=BookingId.generate(),
            flight_id=flight_id,
            passenger_name=passenger_name,
            status=BookingStatus.PENDING,
        )
        with self._lock_for(booking.id):
            self._bookings[booking.id] = booking
        return booking

    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        with self._lock_for(booking_id):
            return self._bookings.get(booking_id)

    def try_transition(
        self,
        booking_id: BookingId,
        target: BookingStatus,
        expected: BookingStatus | None = None,
    ) -> bool:
        with self._lock_for(booking_id):
            current = self._bookings.get(booking_id)
            if current is None:
                return False
            if expected is not None and current.status != expected:
                return False
            if self._transitions is not None and not self._transitions.is_allowed(
                current.status, target
            ):
                return False
            self._bookings[booking_id] = current.with_status(target)
            return True

    def count(self) -> int:
        return len(self._bookings)
