from abc import abstractmethod

from airline.booking.domain.entity import Booking
from airline.booking.domain.enum import BookingStatus
from airline.booking.domain.value_object import BookingId
from airline.flight.domain.value_object import FlightId
from airline.shared.domain import Repository


class BookingLedger(Repository[Booking, BookingId]):
    """予約台帳

    予約IDから予約への対応を保持する唯一の正。
    見つからない場合は None / False を返し、例外は送出しない。
    具象実装は Infrastructure 層で行う。
    """

    @abstractmethod
    def create(self, flight_id: FlightId, passenger_name: str) -> Booking:
        """PENDING の予約を新規作成して保存する

        フライトの存在確認は呼び出し側の責務。
        """
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        """予約IDで検索"""
        raise NotImplementedError

    @abstractmethod
    def try_transition(
        self,
        booking_id: BookingId,
        target: BookingStatus,
        expected: BookingStatus | None = None,
    ) -> bool:
        """ステータスを target に変更する

        以下の場合は何も変更せず False を返す:
        - 予約IDが存在しない
        - expected が指定され、現在のステータスと一致しない
        - 遷移表が設定され、現在のステータスから target への遷移が許可されていない
        """
        raise NotImplementedError

    @abstractmethod
    def count(self) -> int:
        """保存されている予約の件数"""
        raise NotImplementedError
