"""Redis Log Store — log de bans e ações de moderação.

Estrutura de chaves (com REDIS_KEY_PREFIX opcional na frente):
    ban:{banId}                → HASH do BanRecord
    modlog:{logId}             → HASH do ModActionRecord
    bans:timeline              → ZSET banId por timestamp
    bans:subreddit:{name}      → ZSET banId por timestamp
    modlogs:timeline           → ZSET logId por timestamp
    app:initialized            → epoch ms do fim do backfill
    app:backfillCount          → quantidade importada no backfill

Hash e índices de um registro vão no mesmo pipeline. Reescrever o mesmo
registro é upsert: HSET sobrescreve campos e ZADD só atualiza o score.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

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
from utils.errors import RedisConnectionError

if TYPE_CHECKING:
    from redis.asyncio import Redis as AsyncRedis

logger = logging.getLogger(__name__)


def _decode(value: Any) -> str:
    return value.decode() if isinstance(value, bytes) else str(value)


def _decode_hash(raw: dict[Any, Any]) -> dict[str, str]:
    return {_decode(k): _decode(v) for k, v in raw.items()}


def _optional_int(value: Any) -> int | None:
    if value is None:
        return None
    try:
        return int(_decode(value))
    except ValueError:
        return None


class RedisLogStore(LogStoreProtocol):
    """Log Store usando Redis.

    Args:
        redis_client: Cliente Redis assíncrono
        key_prefix: Namespace aplicado a todas as chaves (ex.: "mysub:")
    """

    def __init__(self, redis_client: AsyncRedis[bytes], key_prefix: str = "") -> None:
        self._redis = redis_client
        self._prefix = key_prefix

    def _key(self, key: str) -> str:
        """Gera chave Redis com namespace."""
        return f"{self._prefix}{key}"

    # ──────────────────────────────────────────────────────────────
    # Escrita
    # ──────────────────────────────────────────────────────────────

    async def put_ban(self, record: BanRecord) -> None:
        """Grava o hash do ban e o indexa nas timelines global e do subreddit."""
        try:
            pipeline = self._redis.pipeline()
            pipeline.hset(self._key(f"{BAN_PREFIX}{record.ban_id}"), mapping=record.to_hash())
            pipeline.zadd(self._key(BANS_TIMELINE), {record.ban_id: record.timestamp})
            pipeline.zadd(
                self._key(f"{BANS_SUBREDDIT_PREFIX}{record.subreddit}"),
                {record.ban_id: record.timestamp},
            )
            await pipeline.execute()
        except Exception as exc:
            raise RedisConnectionError("Falha ao gravar ban no Redis") from exc
        logger.info(
            "ban_stored",
            extra={"ban_id": record.ban_id, "subreddit": record.subreddit},
        )

    async def put_mod_action(self, record: ModActionRecord) -> None:
        """Grava o hash da ação e a indexa na timeline de mod log."""
        try:
            pipeline = self._redis.pipeline()
            pipeline.hset(
                self._key(f"{MOD_ACTION_PREFIX}{record.log_id}"), mapping=record.to_hash()
            )
            pipeline.zadd(self._key(MOD_ACTIONS_TIMELINE), {record.log_id: record.timestamp})
            await pipeline.execute()
        except Exception as exc:
            raise RedisConnectionError("Falha ao gravar ação de moderação no Redis") from exc
        logger.info(
            "mod_action_stored",
            extra={"log_id": record.log_id, "action": record.action},
        )

    async def mark_backfill_complete(self, initialized_at: int, backfill_count: int) -> None:
        """Grava os marcadores de instalação concluída."""
        try:
            pipeline = self._redis.pipeline()
            pipeline.set(self._key(INITIALIZED_MARKER), str(initialized_at))
            pipeline.set(self._key(BACKFILL_COUNT_MARKER), str(backfill_count))
            await pipeline.execute()
        except Exception as exc:
            raise RedisConnectionError("Falha ao gravar marcadores de backfill") from exc

    # ──────────────────────────────────────────────────────────────
    # Leitura (relatórios, fora do caminho quente)
    # ──────────────────────────────────────────────────────────────

    async def get_ban(self, ban_id: str) -> BanRecord | None:
        try:
            raw = await self._redis.hgetall(self._key(f"{BAN_PREFIX}{ban_id}"))
        except Exception as exc:
            raise RedisConnectionError("Falha ao ler ban no Redis") from exc
        if not raw:
            return None
        try:
            return BanRecord.from_hash(_decode_hash(raw))
        except (KeyError, ValueError) as e:
            logger.warning("ban_load_error", extra={"ban_id": ban_id, "error": str(e)})
            return None

    async def get_mod_action(self, log_id: str) -> ModActionRecord | None:
        try:
            raw = await self._redis.hgetall(self._key(f"{MOD_ACTION_PREFIX}{log_id}"))
        except Exception as exc:
            raise RedisConnectionError("Falha ao ler ação de moderação no Redis") from exc
        if not raw:
            return None
        try:
            return ModActionRecord.from_hash(_decode_hash(raw))
        except (KeyError, ValueError) as e:
            logger.warning("mod_action_load_error", extra={"log_id": log_id, "error": str(e)})
            return None

    async def recent_ban_ids(self, subreddit: str | None = None, limit: int = 25) -> list[str]:
        index = f"{BANS_SUBREDDIT_PREFIX}{subreddit}" if subreddit else BANS_TIMELINE
        if limit <= 0:
            return []
        try:
            members = await self._redis.zrevrange(self._key(index), 0, limit - 1)
        except Exception as exc:
            raise RedisConnectionError("Falha ao ler timeline de bans") from exc
        return [_decode(member) for member in members]

    async def get_backfill_markers(self) -> BackfillMarkers:
        try:
            initialized_at, backfill_count = await self._redis.mget(
                self._key(INITIALIZED_MARKER), self._key(BACKFILL_COUNT_MARKER)
            )
        except Exception as exc:
            raise RedisConnectionError("Falha ao ler marcadores de backfill") from exc
        return BackfillMarkers(
            initialized_at=_optional_int(initialized_at),
            backfill_count=_optional_int(backfill_count),
        )
