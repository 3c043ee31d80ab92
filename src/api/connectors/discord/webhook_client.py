"""Cliente de webhook do Discord.

Uma chamada POST por notificação, com o embed composto e remetente fixo.
Status não-2xx ou falha de rede viram DispatchResult(success=False):
registrados em log, nunca relançados, nunca repetidos.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from api.connectors.http_base import HttpClient, HttpClientConfig, HttpError
from app.protocols.models import DispatchResult

if TYPE_CHECKING:
    import httpx

    from app.protocols.models import NotificationMessage
    from config.settings import NotificationSettings

logger = logging.getLogger(__name__)


class DiscordWebhookClient:
    """Dispatcher de notificações para webhooks do Discord.

    Args:
        http_client: Cliente HTTP base
        sender_name: Nome exibido como remetente
        avatar_url: Avatar exibido como remetente
    """

    def __init__(
        self,
        http_client: HttpClient,
        sender_name: str,
        avatar_url: str = "",
    ) -> None:
        self._http = http_client
        self._sender_name = sender_name
        self._avatar_url = avatar_url

    def build_payload(self, message: NotificationMessage) -> dict[str, Any]:
        """Monta o corpo JSON aceito pelo endpoint de webhook."""
        payload: dict[str, Any] = {
            "username": self._sender_name,
            "embeds": [message.to_embed()],
        }
        if self._avatar_url:
            payload["avatar_url"] = self._avatar_url
        return payload

    async def dispatch(self, message: NotificationMessage, webhook_url: str) -> DispatchResult:
        """Envia a mensagem ao webhook.

        Args:
            message: Mensagem composta
            webhook_url: URL do webhook (segredo; nunca logada)

        Returns:
            DispatchResult com sucesso ou motivo da falha
        """
        try:
            response = await self._http.post(webhook_url, json=self.build_payload(message))
        except HttpError as exc:
            logger.error("discord_webhook_unreachable", extra={"error": str(exc)})
            return DispatchResult(success=False, error=str(exc))

        if not response.is_success:
            logger.error(
                "discord_webhook_error",
                extra={
                    "status_code": response.status_code,
                    "reason_phrase": response.reason_phrase,
                },
            )
            return DispatchResult(
                success=False,
                status_code=response.status_code,
                error=_error_detail(response),
            )

        logger.info("discord_notification_sent", extra={"status_code": response.status_code})
        return DispatchResult(success=True, status_code=response.status_code)


def _error_detail(response: httpx.Response) -> str:
    """Mensagem de erro do Discord, quando o corpo é JSON."""
    try:
        body = response.json()
    except ValueError:
        return f"http_{response.status_code}"
    if isinstance(body, dict) and isinstance(body.get("message"), str):
        return body["message"]
    return f"http_{response.status_code}"


def create_discord_webhook_client(
    settings: NotificationSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> DiscordWebhookClient:
    """Factory do dispatcher com config padrão.

    Args:
        settings: NotificationSettings opcional. Se None, carrega do ambiente.
        transport: Transport httpx alternativo (testes)
    """
    from config.settings import get_notification_settings

    notifications = settings or get_notification_settings()
    http_client = HttpClient(
        HttpClientConfig(
            timeout_seconds=notifications.request_timeout_seconds,
            default_headers={"Content-Type": "application/json"},
        ),
        transport=transport,
    )
    return DiscordWebhookClient(
        http_client,
        sender_name=notifications.sender_name,
        avatar_url=notifications.avatar_url,
    )
