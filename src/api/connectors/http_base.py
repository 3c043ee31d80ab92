"""Cliente HTTP base para conectores da camada API.

Uma chamada por operação, sem retry: cada evento é tratado uma única
vez e a falha volta ao chamador como HttpError.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 10.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


class HttpError(Exception):
    """Erro de requisição HTTP sem dados sensíveis (nunca inclui URL com segredo)."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class HttpClient:
    """Cliente HTTP simples para chamadas externas.

    Args:
        config: Timeout, headers default e verificação TLS
        transport: Transport httpx alternativo (ex.: httpx.MockTransport em testes)
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            verify=self._config.verify_ssl,
            transport=self._transport,
            timeout=self._config.timeout_seconds,
        )

    def _headers(self, headers: dict[str, str] | None) -> dict[str, str]:
        return {**self._config.default_headers, **(headers or {})}

    async def get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        try:
            async with self._client() as client:
                return await client.get(url, params=params, headers=self._headers(headers))
        except httpx.TimeoutException as exc:
            raise HttpError("http_timeout") from exc
        except httpx.HTTPError as exc:
            raise HttpError("http_connection_error") from exc

    async def post(
        self,
        url: str,
        json: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        try:
            async with self._client() as client:
                return await client.post(url, json=json, headers=self._headers(headers))
        except httpx.TimeoutException as exc:
            raise HttpError("http_timeout") from exc
        except httpx.HTTPError as exc:
            raise HttpError("http_connection_error") from exc
