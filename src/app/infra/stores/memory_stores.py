"""Stores em memória — apenas para desenvolvimento e testes.

ATENÇÃO: Não usar em staging/production. Sem persistência entre reinícios.
"""

from __future__ import annotations

from app.domain.moderation_log import BackfillMarkers, BanRecord, ModActionRecord
from app.protocols.log_store import (
    BACKFILL_COUNT_MARKER,
    BAN_PREFIX,
    BANS_SUBREDDIT_PREFIX,
    BANS_TIMELINE,
    INITIALIZED_MARKER,
    MOD_ACTION_PREFIX,
    MOD_ACTIONS_TIMELINE,
    LogStoreProtocol,
)


class MemoryLogStore(LogStoreProtocol):
    """Log Store em memória com a mesma estrutura de chaves do Redis.

    `hashes`, `indexes` e `scalars` ficam expostos para asserções em teste.
    """

    def __init__(self) -> None:
        self.hashes: dict[str, dict[str, str]] = {}
        self.indexes: dict[str, dict[str, float]] = {}  # zset: member -> score
        self.scalars: dict[str, str] = {}

    def _zadd(self, index: str, member: str, score: float) -> None:
        self.indexes.setdefault(index, {})[member] = score

    def index_members(self, index: str) -> list[str]:
        """Membros do índice em ordem crescente de score (como ZRANGE)."""
        entries = self.indexes.get(index, {})
        return [m for m, _ in sorted(entries.items(), key=lambda item: (item[1], item[0]))]

    async def put_ban(self, record: BanRecord) -> None:
        self.hashes[f"{BAN_PREFIX}{record.ban_id}"] = record.to_hash()
        self._zadd(BANS_TIMELINE, record.ban_id, record.timestamp)
        self._zadd(f"{BANS_SUBREDDIT_PREFIX}{record.subreddit}", record.ban_id, record.timestamp)

    async def put_mod_action(self, record: ModActionRecord) -> None:
        self.hashes[f"{MOD_ACTION_PREFIX}{record.log_id}"] = record.to_hash()
        self._zadd(MOD_ACTIONS_TIMELINE, record.log_id, record.timestamp)

    async def mark_backfill_complete(self, initialized_at: int, backfill_count: int) -> None:
        self.scalars[INITIALIZED_MARKER] = str(initialized_at)
        self.scalars[BACKFILL_COUNT_MARKER] = str(backfill_count)

    async def get_ban(self, ban_id: str) -> BanRecord | None:
        data = self.hashes.get(f"{BAN_PREFIX}{ban_id}")
        return BanRecord.from_hash(data) if data else None

    async def get_mod_action(self, log_id: str) -> ModActionRecord | None:
        data = self.hashes.get(f"{MOD_ACTION_PREFIX}{log_id}")
        return ModActionRecord.from_hash(data) if data else None

    async def recent_ban_ids(self, subreddit: str | None = None, limit: int = 25) -> list[str]:
        index = f"{BANS_SUBREDDIT_PREFIX}{subreddit}" if subreddit else BANS_TIMELINE
        if limit <= 0:
            return []
        return list(reversed(self.index_members(index)))[:limit]

    async def get_backfill_markers(self) -> BackfillMarkers:
        initialized_at = self.scalars.get(INITIALIZED_MARKER)
        backfill_count = self.scalars.get(BACKFILL_COUNT_MARKER)
        return BackfillMarkers(
            initialized_at=int(initialized_at) if initialized_at is not None else None,
            backfill_count=int(backfill_count) if backfill_count is not None else None,
        )
