from datetime import date

import pytest

from airline.app_context import AppContext
from airline.booking.domain import BookingStatus
from airline.booking.domain.policy import NeverFailPolicy
from airline.shared.domain.exception import BusinessRuleViolationException
from airline.shared.settings import Settings


class TestAppContext:
    """AppContext.create のテスト"""

    @pytest.fixture
    def create_context(self):
        """擬似障害なしの AppContext を生成する Factory を返す"""

        def _factory(allow_cancel_confirmed: bool = True) -> AppContext:
            return AppContext.create(
                Settings(allow_cancel_confirmed=allow_cancel_confirmed),
                failure_policy=NeverFailPolicy(),
            )

        return _factory

    def test_services_share_one_ledger(self, create_context):
        """作成した予約を別のユースケースから参照・更新できる"""
        # Arrange
        ctx = create_context()
        flight = ctx.search_flights.search("OPO", "LIS", date(2026, 3, 1))[0]

        # Act
        booking = ctx.create_booking.create(flight.id, "Maria Silva")
        ctx.confirm_booking.confirm(booking.id)

        # Assert
        assert ctx.get_booking.get(booking.id).status == BookingStatus.CONFIRMED

    def test_default_settings_allow_cancel_confirmed(self, create_context):
        """既定では確定済みの予約を取り消せる"""
        ctx = create_context()
        flight = ctx.search_flights.search("OPO", "LIS", date(2026, 3, 1))[0]
        booking = ctx.create_booking.create(flight.id, "Maria Silva")
        ctx.confirm_booking.confirm(booking.id)

        canceled = ctx.cancel_booking.cancel(booking.id)

        assert canceled.status == BookingStatus.CANCELED

    def test_strict_settings_reject_cancel_confirmed(self, create_context):
        """厳格な遷移表では確定済みの予約は取り消せない"""
        ctx = create_context(allow_cancel_confirmed=False)
        flight = ctx.search_flights.search("OPO", "LIS", date(2026, 3, 1))[0]
        booking = ctx.create_booking.create(flight.id, "Maria Silva")
        ctx.confirm_booking.confirm(booking.id)

        with pytest.raises(BusinessRuleViolationException):
            ctx.cancel_booking.cancel(booking.id)

        assert ctx.get_booking.get(booking.id).status == BookingStatus.CONFIRMED
