"""Protocolos de notificação outbound (GIF e webhook)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .models import DispatchResult, NotificationMessage


class GifLookupProtocol(Protocol):
    """Busca a URL de thumbnail. Nunca levanta: devolve o GIF default."""

    async def fetch_thumbnail(self, api_key: str) -> str: ...


class NotificationDispatcherProtocol(Protocol):
    """Entrega uma mensagem ao webhook. Falhas viram DispatchResult."""

    async def dispatch(
        self,
        message: NotificationMessage,
        webhook_url: str,
    ) -> DispatchResult: ...
