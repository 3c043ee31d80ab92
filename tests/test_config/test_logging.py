"""Testes de config.logging.

Cobre: configure_logging, log_fallback, CorrelationIdFilter e o
formatter JSON.
"""

from __future__ import annotations

import json
import logging
from unittest.mock import MagicMock

import pytest

from config.logging import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    CorrelationIdFilter,
    configure_logging,
    create_json_formatter,
    get_logger,
    log_fallback,
)
from config.logging.config import DEFAULT_SERVICE_NAME


def _record(msg: str = "ban_stored") -> logging.LogRecord:
    return logging.LogRecord(
        name="app.infra.stores.redis_log_store",
        level=logging.INFO,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


class TestConfigureLogging:
    """Testes para configure_logging."""

    @pytest.mark.parametrize("level", ["DEBUG", "info", "Warning", "ERROR"])
    def test_sets_root_level(self, level: str) -> None:
        configure_logging(level=level)
        assert logging.getLogger().level == getattr(logging, level.upper())

    def test_invalid_level_raises(self) -> None:
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="LOUD")

    def test_replaces_existing_handlers_with_single_json_handler(self) -> None:
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]

        configure_logging(correlation_id_getter=lambda: "corr-1")

        assert len(root.handlers) == 1
        handler = root.handlers[0]
        assert any(isinstance(f, CorrelationIdFilter) for f in handler.filters)

    def test_quiets_http_library_loggers(self) -> None:
        configure_logging(level="DEBUG")
        assert logging.getLogger("httpx").level == logging.WARNING

    def test_default_service_name(self) -> None:
        assert DEFAULT_SERVICE_NAME == "ban_bunny"

    def test_get_logger_returns_named_logger(self) -> None:
        assert get_logger("app.use_cases").name == "app.use_cases"


class TestLogFallback:
    """Testes para log_fallback."""

    def test_basic_fallback(self) -> None:
        logger = MagicMock(spec=logging.Logger)

        log_fallback(logger, "giphy_lookup")

        args, kwargs = logger.info.call_args
        assert args == ("Fallback applied for %s", "giphy_lookup")
        assert kwargs["extra"] == {"fallback_used": True, "component": "giphy_lookup"}

    def test_fallback_with_reason_and_elapsed(self) -> None:
        logger = MagicMock(spec=logging.Logger)

        log_fallback(logger, "ban_enrichment", reason="no_recent_match", elapsed_ms=12.5)

        extra = logger.info.call_args[1]["extra"]
        assert extra["reason"] == "no_recent_match"
        assert extra["elapsed_ms"] == 12.5


class TestCorrelationIdFilter:
    """Testes para CorrelationIdFilter."""

    def test_injects_correlation_id_and_service(self) -> None:
        record = _record()

        assert CorrelationIdFilter("ban_bunny", lambda: "corr-123").filter(record) is True
        assert record.correlation_id == "corr-123"
        assert record.service == "ban_bunny"

    def test_preserves_explicit_correlation_id(self) -> None:
        record = _record()
        record.correlation_id = "explicit"

        CorrelationIdFilter("svc", lambda: "from-getter").filter(record)

        assert record.correlation_id == "explicit"

    def test_defaults_to_empty_string(self) -> None:
        record = _record()

        CorrelationIdFilter("svc").filter(record)

        assert record.correlation_id == ""


class TestJsonFormatter:
    """Testes do formatter JSON."""

    def test_required_fields(self) -> None:
        assert set(REQUIRED_LOG_FIELDS) == {
            "asctime",
            "levelname",
            "name",
            "message",
            "correlation_id",
            "service",
        }
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}

    def test_formats_record_as_json_with_renamed_fields(self) -> None:
        record = _record()
        record.correlation_id = "abc-123"
        record.service = "ban_bunny"
        record.ban_id = "ModAction_1"

        payload = json.loads(create_json_formatter().format(record))

        assert payload["message"] == "ban_stored"
        assert payload["level"] == "INFO"
        assert payload["logger"] == "app.infra.stores.redis_log_store"
        assert payload["correlation_id"] == "abc-123"
        assert payload["ban_id"] == "ModAction_1"
