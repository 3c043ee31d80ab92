"""Cliente do mod log do Reddit (`GET /r/{subreddit}/about/log`).

Percorre o Listing página a página seguindo o cursor `after`, na ordem
entregue pela API (mais recente primeiro), até o limite pedido.
Falhas de rede, status não-2xx ou Listing malformado levantam
ModLogUnavailableError; o chamador decide se aborta.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from api.connectors.http_base import HttpClient, HttpClientConfig, HttpError
from utils.errors import ModLogUnavailableError

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    import httpx

    from config.settings import RedditSettings

logger = logging.getLogger(__name__)


class RedditModLogClient:
    """Fonte de mod log via API OAuth do Reddit.

    Args:
        http_client: Cliente HTTP base (já com Authorization e User-Agent)
        settings: RedditSettings com endpoint e tamanho de página
    """

    def __init__(self, http_client: HttpClient, settings: RedditSettings) -> None:
        self._http = http_client
        self._settings = settings

    async def iter_entries(
        self,
        subreddit: str,
        *,
        action_type: str,
        limit: int,
    ) -> AsyncIterator[dict[str, Any]]:
        """Itera entradas cruas do mod log.

        Args:
            subreddit: Nome do subreddit (sem "r/")
            action_type: Filtro `type` da API (ex.: "banuser")
            limit: Máximo de entradas no total

        Yields:
            Campo `data` de cada filho do Listing

        Raises:
            ModLogUnavailableError: Em qualquer falha de leitura
        """
        endpoint = self._settings.get_mod_log_endpoint(subreddit)
        after: str | None = None
        yielded = 0

        while yielded < limit:
            params: dict[str, Any] = {
                "type": action_type,
                "limit": min(self._settings.page_size, limit - yielded),
                "raw_json": 1,
            }
            if after:
                params["after"] = after

            children, after = await self._fetch_page(endpoint, params)
            for child in children:
                yield child
                yielded += 1
                if yielded >= limit:
                    break

            logger.debug(
                "mod_log_page_read",
                extra={"subreddit": subreddit, "entries": len(children), "total": yielded},
            )
            if not children or not after:
                break

    async def _fetch_page(
        self,
        endpoint: str,
        params: dict[str, Any],
    ) -> tuple[list[dict[str, Any]], str | None]:
        try:
            response = await self._http.get(endpoint, params=params)
        except HttpError as exc:
            raise ModLogUnavailableError(f"Falha de rede ao ler mod log: {exc}") from exc

        if not response.is_success:
            raise ModLogUnavailableError(f"Mod log respondeu HTTP {response.status_code}")

        try:
            body = response.json()
        except ValueError as exc:
            raise ModLogUnavailableError("Mod log retornou JSON inválido") from exc

        return _parse_listing(body)


def _parse_listing(body: Any) -> tuple[list[dict[str, Any]], str | None]:
    """Extrai (entradas, cursor after) de um Listing do Reddit."""
    data = body.get("data") if isinstance(body, dict) else None
    if not isinstance(data, dict) or not isinstance(data.get("children"), list):
        raise ModLogUnavailableError("Mod log retornou Listing malformado")

    entries = [
        child["data"]
        for child in data["children"]
        if isinstance(child, dict) and isinstance(child.get("data"), dict)
    ]
    after = data.get("after")
    return entries, after if isinstance(after, str) and after else None


def create_reddit_mod_log_client(
    settings: RedditSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> RedditModLogClient:
    """Factory do cliente de mod log com config padrão."""
    from config.settings import get_reddit_settings

    reddit = settings or get_reddit_settings()
    headers = {"User-Agent": reddit.user_agent}
    if reddit.access_token:
        headers["Authorization"] = f"Bearer {reddit.access_token}"

    http_client = HttpClient(
        HttpClientConfig(
            timeout_seconds=reddit.request_timeout_seconds,
            default_headers=headers,
        ),
        transport=transport,
    )
    return RedditModLogClient(http_client, reddit)
