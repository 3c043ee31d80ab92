"""Formatter JSON com os campos obrigatórios do serviço."""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {"asctime": "2026-10-19 10:30:00,123", "level": "INFO",
         "logger": "app.use_cases.process_mod_action", "message": "ban_stored",
         "correlation_id": "abc-123", "service": "ban_bunny",
         "ban_id": "ModAction_1", "subreddit": "test"}
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)

    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
    )
