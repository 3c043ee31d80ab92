"""Protocolos e contratos do core da aplicação."""

from .installation_settings import InstallationSettingsProtocol
from .log_store import LogStoreProtocol
from .mod_log_source import ModLogSourceProtocol
from .models import DispatchResult, EmbedField, NotificationMessage
from .normalizer import ModerationEventNormalizerProtocol
from .notification import GifLookupProtocol, NotificationDispatcherProtocol

__all__ = [
    "DispatchResult",
    "EmbedField",
    "GifLookupProtocol",
    "InstallationSettingsProtocol",
    "LogStoreProtocol",
    "ModLogSourceProtocol",
    "ModerationEventNormalizerProtocol",
    "NotificationDispatcherProtocol",
    "NotificationMessage",
]
