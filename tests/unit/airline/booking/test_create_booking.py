from unittest.mock import MagicMock

import pytest

from airline.booking.applications.create_booking import CreateBookingService
from airline.booking.domain import BookingStatus
from airline.flight.domain import FlightId
from airline.shared.domain.exception import ResourceNotFoundException


class TestCreateBookingService:
    """CreateBookingService のテスト"""

    def test_create_for_existing_flight(self, catalog, ledger, opo_lis_flight):
        """存在するフライトに対して PENDING の予約が作成される"""
        # Arrange
        service = CreateBookingService(ledger=ledger, catalog=catalog)
        flight = opo_lis_flight

        # Act
        booking = service.create(flight.id, "Maria Silva")

        # Assert
        assert booking.status == BookingStatus.PENDING
        assert booking.flight_id == flight.id
        assert ledger.find_by_id(booking.id) == booking

    def test_unknown_flight_raises_not_found(self, catalog):
        """存在しないフライトの場合は台帳を呼ばずに例外を送出する"""
        # Arrange
        mock_ledger = MagicMock()
        service = CreateBookingService(ledger=mock_ledger, catalog=catalog)

        # Act / Assert
        with pytest.raises(ResourceNotFoundException, match="Flight not found."):
            service.create(FlightId.generate(), "Maria Silva")
        mock_ledger.create.assert_not_called()
