"""Testes do provider de configuração por instalação via ambiente."""

from __future__ import annotations

import pytest

from app.infra.secrets import EnvInstallationSettings
from config.settings import NotificationSettings


@pytest.mark.asyncio
async def test_uses_global_defaults() -> None:
    provider = EnvInstallationSettings(
        NotificationSettings(discord_webhook_url="https://hook", giphy_api_key="g")
    )

    config = await provider.get("test")

    assert config.webhook_url == "https://hook"
    assert config.gif_api_key == "g"
    assert config.notifications_enabled is True
    assert config.can_notify is True


@pytest.mark.asyncio
async def test_subreddit_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MY_SUB_DISCORD_WEBHOOK_URL", "https://my-sub-hook")
    monkeypatch.setenv("MY_SUB_ENABLE_NOTIFICATIONS", "false")
    provider = EnvInstallationSettings(NotificationSettings(discord_webhook_url="https://hook"))

    config = await provider.get("my-sub")
    other = await provider.get("other")

    assert config.webhook_url == "https://my-sub-hook"
    assert config.notifications_enabled is False
    assert config.can_notify is False
    assert other.webhook_url == "https://hook"


@pytest.mark.asyncio
async def test_repr_hides_secrets() -> None:
    provider = EnvInstallationSettings(
        NotificationSettings(discord_webhook_url="https://hook/secret", giphy_api_key="key")
    )

    config = await provider.get("test")

    assert "secret" not in repr(config)
    assert "key'" not in repr(config)
