"""Cliente Giphy para o thumbnail das notificações.

fetch_thumbnail nunca levanta: sem API key, status não-2xx, erro de
rede ou resposta malformada, devolve o GIF default.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from api.connectors.http_base import HttpClient, HttpClientConfig, HttpError
from config.logging import log_fallback

if TYPE_CHECKING:
    import httpx

    from config.settings import NotificationSettings

logger = logging.getLogger(__name__)

COMPONENT = "giphy_lookup"


class GiphyClient:
    """Lookup de GIF aleatório por tag e rating fixos.

    Args:
        http_client: Cliente HTTP base
        api_url: Endpoint de GIF aleatório
        tag: Tag do sorteio
        rating: Classificação máxima
        default_url: GIF devolvido em qualquer falha
    """

    def __init__(
        self,
        http_client: HttpClient,
        api_url: str,
        tag: str,
        rating: str,
        default_url: str,
    ) -> None:
        self._http = http_client
        self._api_url = api_url
        self._tag = tag
        self._rating = rating
        self._default_url = default_url

    @property
    def default_url(self) -> str:
        return self._default_url

    async def fetch_thumbnail(self, api_key: str) -> str:
        """Retorna URL de um GIF aleatório ou o default."""
        if not api_key:
            log_fallback(logger, COMPONENT, reason="api_key_missing")
            return self._default_url

        started_at = time.perf_counter()
        try:
            response = await self._http.get(
                self._api_url,
                params={"api_key": api_key, "tag": self._tag, "rating": self._rating},
            )
        except HttpError as exc:
            log_fallback(logger, COMPONENT, reason=str(exc), elapsed_ms=_elapsed(started_at))
            return self._default_url

        if not response.is_success:
            logger.warning("giphy_api_error", extra={"status_code": response.status_code})
            log_fallback(logger, COMPONENT, reason=f"http_{response.status_code}")
            return self._default_url

        try:
            url = _extract_gif_url(response.json())
        except ValueError:
            url = None
        if not url:
            log_fallback(logger, COMPONENT, reason="malformed_response")
            return self._default_url
        return url


def _extract_gif_url(body: Any) -> str | None:
    """Lê data.images.original.url sem assumir a forma do JSON."""
    if not isinstance(body, dict):
        return None
    data = body.get("data")
    if not isinstance(data, dict):
        return None
    images = data.get("images")
    if not isinstance(images, dict):
        return None
    original = images.get("original")
    if not isinstance(original, dict):
        return None
    url = original.get("url")
    return url if isinstance(url, str) and url else None


def _elapsed(started_at: float) -> float:
    return round((time.perf_counter() - started_at) * 1000, 2)


def create_giphy_client(
    settings: NotificationSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> GiphyClient:
    """Factory do cliente Giphy com config padrão."""
    from config.settings import get_notification_settings

    notifications = settings or get_notification_settings()
    return GiphyClient(
        HttpClient(
            HttpClientConfig(timeout_seconds=notifications.request_timeout_seconds),
            transport=transport,
        ),
        api_url=notifications.giphy_api_url,
        tag=notifications.giphy_tag,
        rating=notifications.giphy_rating,
        default_url=notifications.default_gif_url,
    )
