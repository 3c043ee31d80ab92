"""Agregador de settings do Ban Bunny.

Re-exporta todas as settings e funções de cada módulo.
"""

from __future__ import annotations

from config.settings.base import (
    BaseSettings,
    Environment,
    LogStoreBackend,
    LogStoreSettings,
    get_base_settings,
    get_log_store_settings,
)
from config.settings.notifications import (
    DEFAULT_GIF_URL,
    NotificationSettings,
    get_notification_settings,
)
from config.settings.reddit import (
    REDDIT_API_BASE_URL,
    RedditSettings,
    get_reddit_settings,
)

__all__ = [
    # Constants
    "DEFAULT_GIF_URL",
    "REDDIT_API_BASE_URL",
    # Base
    "BaseSettings",
    "Environment",
    "LogStoreBackend",
    "LogStoreSettings",
    # Integrations
    "NotificationSettings",
    "RedditSettings",
    "get_base_settings",
    "get_log_store_settings",
    "get_notification_settings",
    "get_reddit_settings",
]
