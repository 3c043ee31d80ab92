"""Connector Discord — webhook de notificação de bans."""

from .webhook_client import DiscordWebhookClient, create_discord_webhook_client

__all__ = [
    "DiscordWebhookClient",
    "create_discord_webhook_client",
]
