"""Unit tests for tessera.infra.observability.logging."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from unittest.mock import patch

import pytest
import structlog
from structlog.testing import capture_logs

from tessera.infra.observability.logging import (
    REDACTED_VALUE,
    LoggingSettings,
    SensitiveDataProcessor,
    configure_logging,
    get_logger,
    get_logging_settings,
)

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    yield
    structlog.reset_defaults()
    get_logging_settings.cache_clear()


class TestLoggingSettings:
    @pytest.mark.unit
    def test_default_values(self) -> None:
        with patch.dict("os.environ", {}, clear=True):
            settings = LoggingSettings()
            assert settings.log_level == "INFO"
            assert settings.environment == "development"

    @pytest.mark.unit
    def test_use_json_logs_production(self) -> None:
        assert LoggingSettings(environment="production").use_json_logs is True

    @pytest.mark.unit
    def test_use_json_logs_development(self) -> None:
        assert LoggingSettings(environment="development").use_json_logs is False

    @pytest.mark.unit
    def test_log_level_int(self) -> None:
        assert LoggingSettings(log_level="DEBUG").log_level_int == logging.DEBUG

    @pytest.mark.unit
    def test_normalize_log_level_lowercase(self) -> None:
        assert LoggingSettings(log_level="warning").log_level == "WARNING"

    @pytest.mark.unit
    def test_invalid_log_level(self) -> None:
        with pytest.raises(ValueError, match="log_level must be one of"):
            LoggingSettings(log_level="VERBOSE")

    @pytest.mark.unit
    def test_from_env_vars(self) -> None:
        env = {"LOG_LEVEL": "error", "ENVIRONMENT": "production"}
        with patch.dict("os.environ", env, clear=True):
            settings = LoggingSettings()
            assert settings.log_level == "ERROR"
            assert settings.use_json_logs is True


class TestSensitiveDataProcessor:
    @pytest.mark.unit
    def test_redacts_exact_match(self) -> None:
        event_dict: dict[str, object] = {"event": "fetch", "token": "abc"}
        result = SensitiveDataProcessor()(None, "info", event_dict)
        assert result["token"] == REDACTED_VALUE

    @pytest.mark.unit
    def test_redacts_suffix_match(self) -> None:
        event_dict: dict[str, object] = {
            "event": "fetch",
            "download_signed_url": "https://cdn.example.com/a?sig=1",
        }
        result = SensitiveDataProcessor()(None, "info", event_dict)
        assert result["download_signed_url"] == REDACTED_VALUE

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "key", ["password_hash", "access_token_expiry", "apikey", "bearer", "signature"]
    )
    def test_redacts_substring_and_legacy_names(self, key: str) -> None:
        event_dict: dict[str, object] = {"event": "fetch", key: "value"}
        result = SensitiveDataProcessor()(None, "info", event_dict)
        assert result[key] == REDACTED_VALUE

    @pytest.mark.unit
    def test_redacts_case_insensitive(self) -> None:
        event_dict: dict[str, object] = {"event": "fetch", "API_KEY": "abc123"}
        result = SensitiveDataProcessor()(None, "info", event_dict)
        assert result["API_KEY"] == REDACTED_VALUE

    @pytest.mark.unit
    def test_preserves_attachment_fields(self) -> None:
        event_dict: dict[str, object] = {
            "event": "parsed",
            "attachment_id": "example.com/doc123",
            "allow_legacy": True,
        }
        result = SensitiveDataProcessor()(None, "info", event_dict)
        assert result["attachment_id"] == "example.com/doc123"
        assert result["allow_legacy"] is True


class TestConfigureLogging:
    @pytest.mark.unit
    def test_configure_with_default_settings(self) -> None:
        with patch.dict("os.environ", {}, clear=True):
            get_logging_settings.cache_clear()
            configure_logging()
        assert structlog.is_configured()

    @pytest.mark.unit
    def test_production_renders_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(LoggingSettings(log_level="INFO", environment="production"))
        get_logger("tests").info("attachment_ids_parsed", parsed=2, token="secret")
        out = capsys.readouterr().out
        assert '"event": "attachment_ids_parsed"' in out
        assert '"parsed": 2' in out
        assert REDACTED_VALUE in out
        assert "secret" not in out

    @pytest.mark.unit
    def test_filters_below_level(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(LoggingSettings(log_level="WARNING", environment="production"))
        get_logger("tests").info("hidden_event")
        assert "hidden_event" not in capsys.readouterr().out


class TestGetLogger:
    @pytest.mark.unit
    def test_binds_logger_name(self) -> None:
        with capture_logs() as logs:
            get_logger("tessera.tests").info("hello")
        assert logs == [{"event": "hello", "log_level": "info", "logger": "tessera.tests"}]

    @pytest.mark.unit
    def test_unbound_logger_when_no_name(self) -> None:
        with capture_logs() as logs:
            get_logger().info("hello")
        assert "logger" not in logs[0]
