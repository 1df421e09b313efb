import pytest

from airline.booking.domain import Booking, BookingId, BookingStatus
from airline.flight.domain import FlightId


@pytest.fixture
def create_booking():
    """Booking を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        status: BookingStatus = BookingStatus.PENDING,
        booking_id: str = "booking-123",
        flight_id: str = "flight-123",
        passenger_name: str = "Maria Silva",
    ) -> Booking:
        return Booking(
            id=BookingId(value=booking_id),
            flight_id=FlightId(value=flight_id),
            passenger_name=passenger_name,
            status=status,
        )

    return _factory
