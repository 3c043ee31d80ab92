"""Protocolo de normalização de eventos de moderação."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.domain.moderation_log import BanRecord, NormalizedEvent


class ModerationEventNormalizerProtocol(Protocol):
    """Converte formatos crus da plataforma nos registros canônicos.

    Nenhum componente depois desta fronteira vê o payload cru.
    """

    def normalize_trigger_event(
        self,
        event: dict[str, Any],
        *,
        now_ms: int,
    ) -> NormalizedEvent: ...

    def normalize_mod_log_entry(
        self,
        entry: dict[str, Any],
        *,
        subreddit: str,
    ) -> NormalizedEvent: ...

    def needs_enrichment(self, event: dict[str, Any]) -> bool: ...

    def matches_target(self, entry: dict[str, Any], user: str) -> bool: ...

    def apply_enrichment(self, record: BanRecord, entry: dict[str, Any]) -> BanRecord: ...
