"""Settings de notificação: webhook do Discord e lookup de GIF no Giphy.

Os três valores por instalação (webhook, API key do Giphy e flag de
habilitação) vêm daqui quando o provider de instalação é o de ambiente.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

GIPHY_RANDOM_API_URL: str = "https://api.giphy.com/v1/gifs/random"
DEFAULT_GIF_URL: str = "https://media.giphy.com/media/qPD4yGsrc0pdm/giphy.gif"
DEFAULT_SENDER_NAME: str = "Ban Bunny"
DEFAULT_AVATAR_URL: str = "https://i.imgur.com/your-bunny-avatar.png"


@dataclass(frozen=True)
class NotificationSettings:
    """Configurações de notificação de bans.

    Attributes:
        discord_webhook_url: URL do webhook Discord (segredo)
        giphy_api_key: API key do Giphy (segredo)
        notifications_enabled: Liga/desliga o envio ao Discord
        sender_name: Nome exibido como remetente no Discord
        avatar_url: Avatar exibido como remetente no Discord
        giphy_api_url: Endpoint de GIF aleatório
        giphy_tag: Tag usada no sorteio do GIF
        giphy_rating: Classificação máxima do GIF
        default_gif_url: GIF usado quando o lookup falha
        request_timeout_seconds: Timeout das chamadas HTTP de notificação
    """

    # Credenciais por instalação
    discord_webhook_url: str = ""
    giphy_api_key: str = ""
    notifications_enabled: bool = True

    # Discord
    sender_name: str = DEFAULT_SENDER_NAME
    avatar_url: str = DEFAULT_AVATAR_URL

    # Giphy
    giphy_api_url: str = GIPHY_RANDOM_API_URL
    giphy_tag: str = "kicked out"
    giphy_rating: str = "pg"
    default_gif_url: str = DEFAULT_GIF_URL

    request_timeout_seconds: float = 10.0

    def validate(self) -> list[str]:
        """Valida configurações de notificação.

        Webhook ausente não é erro: o envio é pulado em runtime.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if self.discord_webhook_url and not self.discord_webhook_url.startswith("https://"):
            errors.append("DISCORD_WEBHOOK_URL deve usar https://")

        if not self.sender_name:
            errors.append("DISCORD_SENDER_NAME não pode ser vazio")

        if not self.default_gif_url:
            errors.append("DEFAULT_GIF_URL não pode ser vazio")

        if self.request_timeout_seconds <= 0:
            errors.append("NOTIFICATION_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> NotificationSettings:
    """Carrega NotificationSettings a partir de variáveis de ambiente."""
    return NotificationSettings(
        discord_webhook_url=os.getenv("DISCORD_WEBHOOK_URL", ""),
        giphy_api_key=os.getenv("GIPHY_API_KEY", ""),
        notifications_enabled=os.getenv("ENABLE_NOTIFICATIONS", "true").lower()
        in ("true", "1", "yes"),
        sender_name=os.getenv("DISCORD_SENDER_NAME", DEFAULT_SENDER_NAME),
        avatar_url=os.getenv("DISCORD_AVATAR_URL", DEFAULT_AVATAR_URL),
        giphy_api_url=os.getenv("GIPHY_API_URL", GIPHY_RANDOM_API_URL),
        giphy_tag=os.getenv("GIPHY_TAG", "kicked out"),
        giphy_rating=os.getenv("GIPHY_RATING", "pg"),
        default_gif_url=os.getenv("DEFAULT_GIF_URL", DEFAULT_GIF_URL),
        request_timeout_seconds=float(os.getenv("NOTIFICATION_TIMEOUT_SECONDS", "10")),
    )


@lru_cache(maxsize=1)
def get_notification_settings() -> NotificationSettings:
    """Retorna instância cacheada de NotificationSettings."""
    return _load_from_env()
