"""Normalizer Reddit — eventos de moderação → registros canônicos.

Regras:
- banuser: BanRecord, exceto quando o alvo é o AutoModerator (Skip)
- unbanuser: Skip
- qualquer outra ação: ModActionRecord

Funções puras; todo IO fica nos use cases.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.domain.moderation_log import (
    AUTOMODERATOR,
    BAN_ACTION,
    UNBAN_ACTION,
    UNKNOWN,
    BanRecord,
    ModActionRecord,
    NormalizedEvent,
    Skip,
)

from ._extraction_helpers import (
    entry_timestamp_ms,
    first_name,
    normalize_duration,
    text_field,
)

if TYPE_CHECKING:
    from app.protocols.normalizer import ModerationEventNormalizerProtocol

logger = logging.getLogger(__name__)

SKIP_UNBAN = "unban"
SKIP_AUTOMODERATOR = "automoderator_target"
SKIP_INVALID_TIMESTAMP = "invalid_timestamp"


def _classify(action: str | None, target: str | None) -> Skip | None:
    if action == UNBAN_ACTION:
        return Skip(SKIP_UNBAN)
    if action == BAN_ACTION and target == AUTOMODERATOR:
        return Skip(SKIP_AUTOMODERATOR)
    return None


def normalize_trigger_event(event: dict[str, Any], *, now_ms: int) -> NormalizedEvent:
    """Normaliza um trigger de ModAction recebido em tempo real.

    O timestamp é o momento da normalização, não o do evento original.

    Args:
        event: Payload cru do trigger
        now_ms: Epoch ms atual (injetado para testes determinísticos)

    Returns:
        BanRecord, ModActionRecord ou Skip
    """
    action = text_field(event, "action")
    target = first_name(event, "targetUser", "target")
    skip = _classify(action, target)
    if skip is not None:
        return skip

    action_id = text_field(event, "actionId") or text_field(event, "id")
    moderator = first_name(event, "moderator", "mod") or UNKNOWN
    subreddit = first_name(event, "subreddit") or UNKNOWN

    if action == BAN_ACTION:
        return BanRecord(
            ban_id=action_id or f"ban-{now_ms}",
            user=target or UNKNOWN,
            moderator=moderator,
            reason=text_field(event, "details") or "",
            duration=normalize_duration(text_field(event, "description")),
            subreddit=subreddit,
            timestamp=now_ms,
        )

    return ModActionRecord(
        log_id=action_id or f"modlog-{now_ms}",
        action=action or UNKNOWN,
        target_user=target or UNKNOWN,
        moderator=moderator,
        details=text_field(event, "details") or "",
        subreddit=subreddit,
        timestamp=now_ms,
    )


def normalize_mod_log_entry(entry: dict[str, Any], *, subreddit: str) -> NormalizedEvent:
    """Normaliza uma entrada histórica do mod log (backfill).

    Usa o timestamp real da entrada.

    Args:
        entry: Entrada crua do mod log
        subreddit: Subreddit da instalação

    Returns:
        BanRecord, ModActionRecord ou Skip
    """
    action = text_field(entry, "action")
    target = first_name(entry, "target_author", "target", "targetUser")
    skip = _classify(action, target)
    if skip is not None:
        return skip

    timestamp = entry_timestamp_ms(entry)
    if timestamp is None:
        logger.warning(
            "mod_log_entry_without_timestamp",
            extra={"entry_id": entry.get("id"), "subreddit": subreddit},
        )
        return Skip(SKIP_INVALID_TIMESTAMP)

    entry_id = text_field(entry, "id")
    moderator = first_name(entry, "mod", "moderator") or UNKNOWN

    if action == BAN_ACTION:
        return BanRecord(
            ban_id=entry_id or f"ban-{timestamp}",
            user=target or UNKNOWN,
            moderator=moderator,
            reason=text_field(entry, "details") or "",
            duration=normalize_duration(text_field(entry, "description")),
            subreddit=subreddit,
            timestamp=timestamp,
        )

    return ModActionRecord(
        log_id=entry_id or f"modlog-{timestamp}",
        action=action or UNKNOWN,
        target_user=target or UNKNOWN,
        moderator=moderator,
        details=text_field(entry, "details") or "",
        subreddit=subreddit,
        timestamp=timestamp,
    )


def needs_enrichment(event: dict[str, Any]) -> bool:
    """True quando o trigger não traz nem motivo nem duração."""
    return text_field(event, "details") is None and text_field(event, "description") is None


def matches_target(entry: dict[str, Any], user: str) -> bool:
    """Entrada de ban do mod log cujo alvo é o usuário informado."""
    if text_field(entry, "action") != BAN_ACTION:
        return False
    target = first_name(entry, "target_author", "target", "targetUser")
    return bool(target) and target.casefold() == user.casefold()


def apply_enrichment(record: BanRecord, entry: dict[str, Any]) -> BanRecord:
    """Copia motivo e duração da entrada do mod log para o ban ao vivo."""
    return record.with_details(
        reason=text_field(entry, "details") or "",
        duration=normalize_duration(text_field(entry, "description")),
    )


class RedditEventNormalizer:
    """Adapter do normalizer para injeção nos use cases."""

    def normalize_trigger_event(self, event: dict[str, Any], *, now_ms: int) -> NormalizedEvent:
        return normalize_trigger_event(event, now_ms=now_ms)

    def normalize_mod_log_entry(
        self,
        entry: dict[str, Any],
        *,
        subreddit: str,
    ) -> NormalizedEvent:
        return normalize_mod_log_entry(entry, subreddit=subreddit)

    def needs_enrichment(self, event: dict[str, Any]) -> bool:
        return needs_enrichment(event)

    def matches_target(self, entry: dict[str, Any], user: str) -> bool:
        return matches_target(entry, user)

    def apply_enrichment(self, record: BanRecord, entry: dict[str, Any]) -> BanRecord:
        return apply_enrichment(record, entry)


def create_reddit_normalizer() -> ModerationEventNormalizerProtocol:
    """Factory do normalizer padrão."""
    return RedditEventNormalizer()


def subreddit_of(event: dict[str, Any]) -> str | None:
    """Nome do subreddit de um trigger (necessário antes de normalizar)."""
    return first_name(event, "subreddit")
