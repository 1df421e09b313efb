from dataclasses import dataclass
from datetime import date
from unittest.mock import MagicMock

import pytest

from airline.booking.infrastructure import InMemoryBookingLedger
from airline.flight.infrastructure import InMemoryFlightCatalog


@pytest.fixture
def catalog():
    """シードデータで構築したカタログ"""
    return InMemoryFlightCatalog.from_seed()


@pytest.fixture
def opo_lis_flight(catalog):
    """OPO -> LIS 2026-03-01 のフライト"""
    return catalog.search("OPO", "LIS", date(2026, 3, 1))[0]


@pytest.fixture
def ledger():
    """遷移表なし（上書き）の台帳"""
    return InMemoryBookingLedger()


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()


@pytest.fixture
def lambda_context():
    """Lambda の context を模したオブジェクト"""

    @dataclass
    class LambdaContext:
        function_name: str = "booking-api"
        memory_limit_in_mb: int = 256
        invoked_function_arn: str = (
            "arn:aws:lambda:eu-west-1:123456789012:function:booking-api"
        )
        aws_request_id: str = "52fdfc07-2182-454f-963f-5f0f9a621d72"

    return LambdaContext()
