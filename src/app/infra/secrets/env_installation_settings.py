"""Configuração por instalação via variáveis de ambiente.

Os valores globais vêm de NotificationSettings. Um subreddit pode
sobrescrever cada um com variáveis prefixadas pelo nome:

    DISCORD_WEBHOOK_URL=...            # default
    MYSUB_DISCORD_WEBHOOK_URL=...      # só r/mysub
    MYSUB_ENABLE_NOTIFICATIONS=false
"""

from __future__ import annotations

import logging
import os
import re
from typing import TYPE_CHECKING

from app.domain.installation import InstallationConfig

if TYPE_CHECKING:
    from config.settings import NotificationSettings

logger = logging.getLogger(__name__)

_NON_ALNUM = re.compile(r"[^A-Z0-9]+")


class EnvInstallationSettings:
    """Provider de InstallationConfig lido do ambiente.

    Args:
        defaults: NotificationSettings com os valores globais
    """

    def __init__(self, defaults: NotificationSettings) -> None:
        self._defaults = defaults

    def _env_key(self, subreddit: str, key: str) -> str:
        """Converte subreddit + chave em variável de ambiente."""
        # my-sub + DISCORD_WEBHOOK_URL -> MY_SUB_DISCORD_WEBHOOK_URL
        prefix = _NON_ALNUM.sub("_", subreddit.upper()).strip("_")
        return f"{prefix}_{key}" if prefix else key

    def _lookup(self, subreddit: str, key: str, default: str) -> str:
        value = os.getenv(self._env_key(subreddit, key))
        return default if value is None else value

    async def get(self, subreddit: str) -> InstallationConfig:
        """Snapshot da configuração do subreddit."""
        enabled_raw = self._lookup(
            subreddit,
            "ENABLE_NOTIFICATIONS",
            "true" if self._defaults.notifications_enabled else "false",
        )
        config = InstallationConfig(
            webhook_url=self._lookup(
                subreddit, "DISCORD_WEBHOOK_URL", self._defaults.discord_webhook_url
            ),
            gif_api_key=self._lookup(subreddit, "GIPHY_API_KEY", self._defaults.giphy_api_key),
            notifications_enabled=enabled_raw.lower() in ("true", "1", "yes"),
        )
        logger.debug(
            "installation_settings_loaded",
            extra={
                "subreddit": subreddit,
                "webhook_configured": bool(config.webhook_url),
                "gif_key_configured": bool(config.gif_api_key),
                "notifications_enabled": config.notifications_enabled,
            },
        )
        return config
