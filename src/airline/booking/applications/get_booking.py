from aws_lambda_powertools import Logger

from airline.booking.domain.entity import Booking
from airline.booking.domain.repository import BookingLedger
from airline.booking.domain.value_object import BookingId
from airline.shared.domain.exception import ResourceNotFoundException

logger = Logger(child=True)


class GetBookingService:
    """予約取得ユースケース"""

    def __init__(self, ledger: BookingLedger) -> None:
        self._ledger = ledger

    def get(self, booking_id: BookingId) -> Booking:
        logger.info("Retrieving booking", extra={"booking_id": str(booking_id)})

        booking = self._ledger.find_by_id(booking_id)
        if booking is None:
            logger.warning("Booking not found", extra={"booking_id": str(booking_id)})
            raise ResourceNotFoundException("Booking not found.")
        return booking
