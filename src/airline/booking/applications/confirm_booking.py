from aws_lambda_powertools import Logger

from airline.booking.applications.transition_booking import TransitionBookingService
from airline.booking.domain.entity import Booking
from airline.booking.domain.enum import BookingStatus
from airline.booking.domain.value_object import BookingId

logger = Logger(child=True)


class ConfirmBookingService(TransitionBookingService):
    """予約確定ユースケース"""

    target_status = BookingStatus.CONFIRMED
    operation = "confirmed"

    def confirm(self, booking_id: BookingId) -> Booking:
        """予約を確定する"""
        logger.info("Confirming booking", extra={"booking_id": str(booking_id)})
        booking = self._transition(booking_id)
        logger.info("Booking confirmed", extra={"booking_id": str(booking_id)})
        return booking
