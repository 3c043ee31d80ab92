"""Use case do trigger AppInstall: importa bans históricos do mod log.

Estados: IDLE → RUNNING → DONE (terminal). Qualquer falha no laço de
leitura/gravação aborta o restante (ABORTED) sem gravar os marcadores;
a ausência de `app:initialized` indica backfill incompleto. Não há
re-execução automática e nenhuma notificação é enviada.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from app.domain.moderation_log import BAN_ACTION, BanRecord, ModActionRecord
from utils.errors import InfrastructureError

if TYPE_CHECKING:
    from collections.abc import Callable

    from app.protocols.log_store import LogStoreProtocol
    from app.protocols.mod_log_source import ModLogSourceProtocol
    from app.protocols.normalizer import ModerationEventNormalizerProtocol

logger = logging.getLogger(__name__)

DEFAULT_BACKFILL_LIMIT = 500


def _now_ms() -> int:
    return int(time.time() * 1000)


class BackfillState(StrEnum):
    """Estados do backfill de instalação."""

    IDLE = "idle"
    RUNNING = "running"
    DONE = "done"
    ABORTED = "aborted"


@dataclass(frozen=True, slots=True)
class BackfillResult:
    """Resultado do backfill."""

    subreddit: str
    state: BackfillState
    imported: int = 0
    skipped: int = 0
    error: str | None = None


class BackfillBanHistoryUseCase:
    """Semeia o Log Store com os bans históricos do subreddit."""

    def __init__(
        self,
        *,
        normalizer: ModerationEventNormalizerProtocol,
        log_store: LogStoreProtocol,
        mod_log_source: ModLogSourceProtocol,
        limit: int = DEFAULT_BACKFILL_LIMIT,
        clock: Callable[[], int] = _now_ms,
    ) -> None:
        self._normalizer = normalizer
        self._log_store = log_store
        self._mod_log_source = mod_log_source
        self._limit = limit
        self._clock = clock

    async def execute(self, subreddit: str | None) -> BackfillResult:
        """Executa o backfill de um subreddit recém-instalado.

        Args:
            subreddit: Nome do subreddit do evento de instalação

        Returns:
            BackfillResult com estado final e contagens
        """
        if not subreddit:
            logger.error("install_event_without_subreddit")
            return BackfillResult(
                subreddit="", state=BackfillState.ABORTED, error="missing_subreddit"
            )

        logger.info("backfill_started", extra={"subreddit": subreddit, "limit": self._limit})
        state = BackfillState.RUNNING
        imported = 0
        skipped = 0

        try:
            async for entry in self._mod_log_source.iter_entries(
                subreddit,
                action_type=BAN_ACTION,
                limit=self._limit,
            ):
                normalized = self._normalizer.normalize_mod_log_entry(entry, subreddit=subreddit)
                if isinstance(normalized, BanRecord):
                    await self._log_store.put_ban(normalized)
                    imported += 1
                elif isinstance(normalized, ModActionRecord):
                    await self._log_store.put_mod_action(normalized)
                else:
                    skipped += 1

            await self._log_store.mark_backfill_complete(self._clock(), imported)
        except InfrastructureError as exc:
            logger.exception(
                "backfill_aborted",
                extra={"subreddit": subreddit, "imported": imported, "state": state},
            )
            return BackfillResult(
                subreddit=subreddit,
                state=BackfillState.ABORTED,
                imported=imported,
                skipped=skipped,
                error=type(exc).__name__,
            )

        state = BackfillState.DONE
        logger.info(
            "backfill_completed",
            extra={"subreddit": subreddit, "imported": imported, "skipped": skipped},
        )
        return BackfillResult(
            subreddit=subreddit,
            state=state,
            imported=imported,
            skipped=skipped,
        )
