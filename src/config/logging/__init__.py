"""Configuração de logging estruturado.

Uso:
    from config.logging import configure_logging, get_logger

    # No bootstrap
    configure_logging(level="INFO", service_name="ban_bunny")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("ban_stored", extra={"ban_id": "abc123", "subreddit": "test"})

Todo log sai em JSON com correlation_id, service, level, logger e message.
"""

from config.logging.config import configure_logging, get_logger, log_fallback
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "log_fallback",
]
