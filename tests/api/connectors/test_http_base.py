"""Testes do cliente HTTP base dos connectors."""

from __future__ import annotations

import httpx
import pytest

from api.connectors.http_base import HttpClient, HttpClientConfig, HttpError


@pytest.mark.asyncio
async def test_default_headers_merge_with_request_headers() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"ok": True})

    client = HttpClient(
        HttpClientConfig(default_headers={"User-Agent": "ban-bunny", "X-A": "1"}),
        transport=httpx.MockTransport(handler),
    )

    response = await client.get("https://example.test/x", headers={"X-A": "2"})

    assert response.json() == {"ok": True}
    assert seen[0].headers["User-Agent"] == "ban-bunny"
    assert seen[0].headers["X-A"] == "2"


@pytest.mark.asyncio
async def test_non_2xx_is_returned_not_raised() -> None:
    client = HttpClient(transport=httpx.MockTransport(lambda request: httpx.Response(503)))

    response = await client.post("https://example.test/hook", json={})

    assert response.status_code == 503


@pytest.mark.asyncio
async def test_timeout_becomes_http_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("slow", request=request)

    client = HttpClient(transport=httpx.MockTransport(handler))

    with pytest.raises(HttpError, match="http_timeout"):
        await client.get("https://example.test/x")
