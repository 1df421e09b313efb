from typing import ClassVar

from aws_lambda_powertools import Logger

from airline.booking.domain.entity import Booking
from airline.booking.domain.enum import BookingStatus
from airline.booking.domain.policy import (
    FailureDecision,
    FailurePolicy,
    TransitionContext,
    TransitionTable,
)
from airline.booking.domain.repository import BookingLedger
from airline.booking.domain.value_object import BookingId
from airline.shared.domain.exception import (
    BusinessRuleViolationException,
    DownstreamFailureException,
    OptimisticLockException,
    ResourceNotFoundException,
)

logger = Logger(child=True)


class TransitionBookingService:
    """予約ステータス遷移の共通処理（確定・キャンセル）

    1. 現在の予約を取得する（無ければ ResourceNotFoundException）
    2. 遷移表で現在のステータスからの遷移を検証する
    3. FailurePolicy で擬似障害を判定する
    4. 取得時のステータスを期待値として台帳を更新する（楽観ロック）
    """

    target_status: ClassVar[BookingStatus]
    operation: ClassVar[str]

    def __init__(
        self,
        ledger: BookingLedger,
        transitions: TransitionTable,
        failure_policy: FailurePolicy,
    ) -> None:
        self._ledger = ledger
        self._transitions = transitions
        self._failure_policy = failure_policy

    def _transition(self, booking_id: BookingId) -> Booking:
        log_keys = {"booking_id": str(booking_id), "operation": self.operation}

        booking = self._ledger.find_by_id(booking_id)
        if booking is None:
            logger.warning("Booking not found", extra=log_keys)
            raise ResourceNotFoundException("Booking not found.")

        if not self._transitions.is_allowed(booking.status, self.target_status):
            logger.error(
                "Invalid booking status transition",
                extra={**log_keys, "status": booking.status.value},
            )
            raise BusinessRuleViolationException(self._rejection_message(booking))

        context = TransitionContext(
            booking_id=booking_id,
            current_status=booking.status,
            target_status=self.target_status,
        )
        if self._failure_policy.decide(context) is FailureDecision.FAIL:
            logger.error("Simulated processing failure", extra=log_keys)
            raise DownstreamFailureException("Payment gateway timeout")

        if not self._ledger.try_transition(
            booking_id, self.target_status, expected=booking.status
        ):
            logger.warning(
                "Booking status changed concurrently",
                extra={**log_keys, "expected_status": booking.status.value},
            )
            raise OptimisticLockException(
                f"Booking status conflict: expected {booking.status.value}, "
                f"booking_id={booking_id}"
            )

        return booking.with_status(self.target_status)

    def _rejection_message(self, booking: Booking) -> str:
        return (
            f"Booking cannot be {self.operation}. "
            f"Current status: {booking.status.value}"
        )
