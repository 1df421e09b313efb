import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from airline.booking.domain.enum import BookingStatus
from airline.booking.domain.value_object import BookingId


class FailureDecision(str, Enum):
    """擬似障害の判定結果"""

    SUCCEED = "SUCCEED"
    FAIL = "FAIL"


@dataclass(frozen=True)
class TransitionContext:
    """判定に渡すステータス遷移の情報"""

    booking_id: BookingId
    current_status: BookingStatus
    target_status: BookingStatus


class FailurePolicy(ABC):
    """外部システム（決済ゲートウェイ等）の障害を模擬するポリシー

    確定・キャンセルの直前に呼び出され、FAIL を返すとその操作は失敗する。
    テストでは決定的な実装に差し替える。
    """

    @abstractmethod
    def decide(self, context: TransitionContext) -> FailureDecision:
        raise NotImplementedError


class RandomFailurePolicy(FailurePolicy):
    """一定の確率で失敗させる"""

    def __init__(self, rate: float = 0.1, rng: random.Random | None = None) -> None:
        if not 0.0 <= rate <= 1.0:
            raise ValueError(f"Failure rate must be between 0 and 1: {rate}")
        self._rate = rate
        self._rng = rng or random.Random()

    @property
    def rate(self) -> float:
        return self._rate

    def decide(self, context: TransitionContext) -> FailureDecision:
        if self._rng.random() < self._rate:
            return FailureDecision.FAIL
        return FailureDecision.SUCCEED


class NeverFailPolicy(FailurePolicy):
    def decide(self, context: TransitionContext) -> FailureDecision:
        return FailureDecision.SUCCEED


class AlwaysFailPolicy(FailurePolicy):
    def decide(self, context: TransitionContext) -> FailureDecision:
        return FailureDecision.FAIL
