"""Agregador de settings base."""

from __future__ import annotations

from config.settings.base.core import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.base.log_store import (
    LogStoreBackend,
    LogStoreSettings,
    get_log_store_settings,
)

__all__ = [
    "BaseSettings",
    "Environment",
    "LogStoreBackend",
    "LogStoreSettings",
    "get_base_settings",
    "get_log_store_settings",
]
