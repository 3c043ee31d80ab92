"""Use case do trigger ModAction (tempo real).

Fluxo por evento:
1. Normaliza o payload cru (ban, outra ação ou skip)
2. Outra ação → grava em modlogs e encerra
3. Unban / ban do AutoModerator → nada a fazer
4. Ban novo → enriquece (se preciso), grava, compõe e envia a notificação

Gravar sempre precede notificar. Falha de storage encerra o evento;
falha de enriquecimento ou de envio é registrada e não desfaz a gravação.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Literal

from app.domain.moderation_log import BAN_ACTION, BanRecord, ModActionRecord, Skip
from app.services.ban_notification import compose_ban_notification
from config.logging import log_fallback
from utils.errors import ModLogUnavailableError, RedisConnectionError

if TYPE_CHECKING:
    from collections.abc import Callable

    from app.domain.installation import InstallationConfig
    from app.protocols.log_store import LogStoreProtocol
    from app.protocols.mod_log_source import ModLogSourceProtocol
    from app.protocols.normalizer import ModerationEventNormalizerProtocol
    from app.protocols.notification import (
        GifLookupProtocol,
        NotificationDispatcherProtocol,
    )

logger = logging.getLogger(__name__)

DEFAULT_ENRICHMENT_WINDOW = 10


def _now_ms() -> int:
    return int(time.time() * 1000)


@dataclass(frozen=True, slots=True)
class ModActionOutcome:
    """Resultado do processamento de um trigger ModAction."""

    kind: Literal["ban", "mod_action", "skipped"]
    record_id: str | None = None
    stored: bool = False
    notified: bool = False
    skip_reason: str | None = None
    error: str | None = None


class ProcessModActionUseCase:
    """Orquestra normalização, gravação e notificação de um evento ao vivo."""

    def __init__(
        self,
        *,
        normalizer: ModerationEventNormalizerProtocol,
        log_store: LogStoreProtocol,
        gif_lookup: GifLookupProtocol,
        dispatcher: NotificationDispatcherProtocol,
        mod_log_source: ModLogSourceProtocol | None = None,
        enrichment_window: int = DEFAULT_ENRICHMENT_WINDOW,
        clock: Callable[[], int] = _now_ms,
    ) -> None:
        self._normalizer = normalizer
        self._log_store = log_store
        self._gif_lookup = gif_lookup
        self._dispatcher = dispatcher
        self._mod_log_source = mod_log_source
        self._enrichment_window = enrichment_window
        self._clock = clock

    async def execute(
        self,
        event: dict[str, Any],
        config: InstallationConfig,
    ) -> ModActionOutcome:
        """Processa um trigger ModAction.

        Args:
            event: Payload cru do trigger
            config: Snapshot da configuração da instalação

        Returns:
            ModActionOutcome descrevendo o que foi gravado/enviado
        """
        normalized = self._normalizer.normalize_trigger_event(event, now_ms=self._clock())

        if isinstance(normalized, Skip):
            logger.info("mod_action_skipped", extra={"reason": normalized.reason})
            return ModActionOutcome(kind="skipped", skip_reason=normalized.reason)

        if isinstance(normalized, ModActionRecord):
            return await self._store_mod_action(normalized)

        record = normalized
        logger.info(
            "ban_detected",
            extra={
                "ban_id": record.ban_id,
                "subreddit": record.subreddit,
                "moderator": record.moderator,
            },
        )
        if self._normalizer.needs_enrichment(event):
            record = await self._enrich(record)

        try:
            await self._log_store.put_ban(record)
        except RedisConnectionError:
            logger.exception(
                "ban_store_failed",
                extra={"ban_id": record.ban_id, "subreddit": record.subreddit},
            )
            return ModActionOutcome(kind="ban", record_id=record.ban_id, error="storage_failed")

        notified = await self._notify(record, config)
        return ModActionOutcome(
            kind="ban",
            record_id=record.ban_id,
            stored=True,
            notified=notified,
        )

    async def _store_mod_action(self, record: ModActionRecord) -> ModActionOutcome:
        try:
            await self._log_store.put_mod_action(record)
        except RedisConnectionError:
            logger.exception(
                "mod_action_store_failed",
                extra={"log_id": record.log_id, "action": record.action},
            )
            return ModActionOutcome(
                kind="mod_action", record_id=record.log_id, error="storage_failed"
            )
        return ModActionOutcome(kind="mod_action", record_id=record.log_id, stored=True)

    async def _enrich(self, record: BanRecord) -> BanRecord:
        """Busca motivo/duração na entrada de ban mais recente do mesmo alvo.

        Sem correspondência na janela recente, mantém os defaults
        (motivo vazio, duração permanente).
        """
        if self._mod_log_source is None:
            return record

        try:
            async for entry in self._mod_log_source.iter_entries(
                record.subreddit,
                action_type=BAN_ACTION,
                limit=self._enrichment_window,
            ):
                if self._normalizer.matches_target(entry, record.user):
                    logger.debug("ban_enriched", extra={"ban_id": record.ban_id})
                    return self._normalizer.apply_enrichment(record, entry)
        except ModLogUnavailableError as exc:
            logger.warning("ban_enrichment_failed", extra={"error": str(exc)})
            log_fallback(logger, "ban_enrichment", reason="mod_log_unavailable")
            return record

        log_fallback(logger, "ban_enrichment", reason="no_recent_match")
        return record

    async def _notify(self, record: BanRecord, config: InstallationConfig) -> bool:
        """Gate de configuração + GIF + composição + envio."""
        if not config.notifications_enabled:
            logger.info("notifications_disabled", extra={"subreddit": record.subreddit})
            return False
        if not config.webhook_url:
            logger.warning("discord_webhook_not_configured", extra={"subreddit": record.subreddit})
            return False

        try:
            gif_url = await self._gif_lookup.fetch_thumbnail(config.gif_api_key)
            message = compose_ban_notification(record, gif_url)
            result = await self._dispatcher.dispatch(message, config.webhook_url)
        except Exception:
            logger.exception("ban_notification_failed", extra={"ban_id": record.ban_id})
            return False

        if not result.success:
            logger.warning(
                "ban_notification_not_delivered",
                extra={"ban_id": record.ban_id, "status_code": result.status_code},
            )
        return result.success
