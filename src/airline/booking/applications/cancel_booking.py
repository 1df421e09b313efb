from aws_lambda_powertools import Logger

from airline.booking.applications.transition_booking import TransitionBookingService
from airline.booking.domain.entity import Booking
from airline.booking.domain.enum import BookingStatus
from airline.booking.domain.value_object import BookingId

logger = Logger(child=True)


class CancelBookingService(TransitionBookingService):
    """予約キャンセルユースケース"""

    target_status = BookingStatus.CANCELED
    operation = "canceled"

    def cancel(self, booking_id: BookingId) -> Booking:
        """予約をキャンセルする"""
        logger.info("Canceling booking", extra={"booking_id": str(booking_id)})
        booking = self._transition(booking_id)
        logger.info("Booking canceled", extra={"booking_id": str(booking_id)})
        return booking

    def _rejection_message(self, booking: Booking) -> str:
        if booking.status == BookingStatus.CANCELED:
            return "Booking is already canceled."
        return super()._rejection_message(booking)
