"""Protocolo de leitura de configuração por instalação."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain.installation import InstallationConfig


class InstallationSettingsProtocol(Protocol):
    """Devolve o snapshot de configuração de um subreddit."""

    async def get(self, subreddit: str) -> InstallationConfig: ...
