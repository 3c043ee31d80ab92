"""Snapshot de configuração de uma instalação (subreddit)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class InstallationConfig:
    """Configuração lida uma vez por evento e passada explicitamente.

    Attributes:
        webhook_url: Webhook Discord de destino (segredo)
        gif_api_key: API key do Giphy (segredo)
        notifications_enabled: Flag de envio, default True
    """

    webhook_url: str = ""
    gif_api_key: str = ""
    notifications_enabled: bool = True

    @property
    def can_notify(self) -> bool:
        """Gate do dispatcher: flag ligada e webhook configurado."""
        return self.notifications_enabled and bool(self.webhook_url)

    def __repr__(self) -> str:
        # Nunca expor segredos em logs/tracebacks
        return (
            "InstallationConfig("
            f"webhook_url={'***' if self.webhook_url else ''!r}, "
            f"gif_api_key={'***' if self.gif_api_key else ''!r}, "
            f"notifications_enabled={self.notifications_enabled})"
        )
