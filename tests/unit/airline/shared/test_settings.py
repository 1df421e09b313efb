import pytest
from pydantic import ValidationError

from airline.shared.settings import Settings


class TestSettings:
    """Settings のテスト"""

    def test_defaults(self):
        """環境変数が無い場合の既定値"""
        settings = Settings.from_env({})

        assert settings.failure_rate == 0.1
        assert settings.allow_cancel_confirmed is True

    def test_reads_environment_variables(self):
        settings = Settings.from_env(
            {"FAILURE_RATE": "0.25", "ALLOW_CANCEL_CONFIRMED": "false"}
        )

        assert settings.failure_rate == 0.25
        assert settings.allow_cancel_confirmed is False

    def test_ignores_unrelated_variables(self):
        settings = Settings.from_env({"POWERTOOLS_SERVICE_NAME": "airline-booking"})
        assert settings == Settings()

    @pytest.mark.parametrize(
        "environ",
        [
            {"FAILURE_RATE": "1.5"},
            {"FAILURE_RATE": "-0.1"},
            {"FAILURE_RATE": "often"},
            {"ALLOW_CANCEL_CONFIRMED": "maybe"},
        ],
    )
    def test_invalid_values_fail_fast(self, environ):
        """不正な値は起動時に ValidationError となる"""
        with pytest.raises(ValidationError):
            Settings.from_env(environ)

    def test_reads_os_environ_by_default(self, monkeypatch):
        monkeypatch.setenv("FAILURE_RATE", "0")
        monkeypatch.delenv("ALLOW_CANCEL_CONFIRMED", raising=False)

        assert Settings.from_env().failure_rate == 0.0
