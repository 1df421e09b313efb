import pytest

from airline.booking.applications.get_booking import GetBookingService
from airline.booking.domain import BookingId
from airline.shared.domain.exception import ResourceNotFoundException


class TestGetBookingService:
    """GetBookingService のテスト"""

    def test_get_existing_booking(self, mock_repository, create_booking):
        booking = create_booking()
        mock_repository.find_by_id.return_value = booking
        service = GetBookingService(ledger=mock_repository)

        assert service.get(booking.id) is booking
        mock_repository.find_by_id.assert_called_once_with(booking.id)

    def test_unknown_booking_raises_not_found(self, mock_repository):
        mock_repository.find_by_id.return_value = None
        service = GetBookingService(ledger=mock_repository)

        with pytest.raises(ResourceNotFoundException, match="Booking not found."):
            service.get(BookingId(value="missing"))
