from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from airline.booking.domain.enum import BookingStatus


@dataclass(frozen=True)
class TransitionTable:
    """予約ステータスの遷移表

    現在のステータスから遷移可能なステータスの集合を明示的に持つ。
    表に無い遷移はすべて不正とする。
    """

    allowed: Mapping[BookingStatus, frozenset[BookingStatus]] = field(
        default_factory=dict
    )

    def __post_init__(self) -> None:
        frozen = {
            current: frozenset(targets) for current, targets in self.allowed.items()
        }
        object.__setattr__(self, "allowed", MappingProxyType(frozen))

    def is_allowed(self, current: BookingStatus, target: BookingStatus) -> bool:
        return target in self.allowed.get(current, frozenset())

    @classmethod
    def for_settings(cls, allow_cancel_confirmed: bool) -> TransitionTable:
        """設定値に応じた遷移表を返す"""
        if allow_cancel_confirmed:
            return LEGACY_TRANSITIONS
        return STRICT_TRANSITIONS


# PENDING からのみ遷移でき、CONFIRMED / CANCELED は終端
STRICT_TRANSITIONS = TransitionTable(
    {
        BookingStatus.PENDING: frozenset(
            {BookingStatus.CONFIRMED, BookingStatus.CANCELED}
        ),
    }
)

# 従来の API の挙動: キャンセル済み以外はキャンセルできる
LEGACY_TRANSITIONS = TransitionTable(
    {
        BookingStatus.PENDING: frozenset(
            {BookingStatus.CONFIRMED, BookingStatus.CANCELED}
        ),
        BookingStatus.CONFIRMED: frozenset({BookingStatus.CANCELED}),
    }
)
