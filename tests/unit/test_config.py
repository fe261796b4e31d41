"""Tests for environment-driven Settings."""

import pytest
from pydantic import ValidationError

from invoice_payments.config import Settings, get_settings


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("INVOICE_PAYMENTS_LOG_LEVEL", raising=False)
        monkeypatch.delenv("INVOICE_PAYMENTS_SERIALIZE_INVOICE_ACCESS", raising=False)

        settings = Settings(_env_file=None)

        assert settings.log_level == "INFO"
        assert settings.serialize_invoice_access is True

    def test_reads_prefixed_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("INVOICE_PAYMENTS_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("INVOICE_PAYMENTS_SERIALIZE_INVOICE_ACCESS", "false")

        settings = Settings(_env_file=None)

        assert settings.log_level == "DEBUG"
        assert settings.serialize_invoice_access is False

    def test_invalid_log_level_fails_fast(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("INVOICE_PAYMENTS_LOG_LEVEL", "LOUD")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()
