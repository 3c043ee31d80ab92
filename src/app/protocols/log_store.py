"""Protocolo do Log Store (persistência do log de moderação).

Interface leve (ABC) dependida pelos use cases.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.domain.moderation_log import BackfillMarkers, BanRecord, ModActionRecord

# Chaves lógicas do log
BAN_PREFIX = "ban:"
MOD_ACTION_PREFIX = "modlog:"
BANS_TIMELINE = "bans:timeline"
BANS_SUBREDDIT_PREFIX = "bans:subreddit:"
MOD_ACTIONS_TIMELINE = "modlogs:timeline"
INITIALIZED_MARKER = "app:initialized"
BACKFILL_COUNT_MARKER = "app:backfillCount"


class LogStoreProtocol(ABC):
    """Contrato assíncrono do Log Store.

    Escrita:
    - put_ban: hash `ban:{banId}` + índices `bans:timeline` e
      `bans:subreddit:{subreddit}` (score = timestamp)
    - put_mod_action: hash `modlog:{logId}` + índice `modlogs:timeline`
    - mark_backfill_complete: marcadores `app:initialized` e `app:backfillCount`

    Todas as escritas são upserts idempotentes. Falhas de storage
    propagam como RedisConnectionError.
    """

    @abstractmethod
    async def put_ban(self, record: BanRecord) -> None: ...

    @abstractmethod
    async def put_mod_action(self, record: ModActionRecord) -> None: ...

    @abstractmethod
    async def mark_backfill_complete(self, initialized_at: int, backfill_count: int) -> None: ...

    @abstractmethod
    async def get_ban(self, ban_id: str) -> BanRecord | None: ...

    @abstractmethod
    async def get_mod_action(self, log_id: str) -> ModActionRecord | None: ...

    @abstractmethod
    async def recent_ban_ids(self, subreddit: str | None = None, limit: int = 25) -> list[str]:
        """IDs de ban do mais recente para o mais antigo.

        Args:
            subreddit: Restringe ao índice do subreddit; None usa o global.
            limit: Máximo de IDs retornados.
        """

    @abstractmethod
    async def get_backfill_markers(self) -> BackfillMarkers: ...
