"""Endpoint de leitura do log de bans (relatórios/admin).

Fora do caminho quente: apenas lê o que os triggers gravaram.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from utils.errors import RedisConnectionError

logger = logging.getLogger(__name__)

router = APIRouter()

MAX_RECENT_LIMIT = 100


class BanItem(BaseModel):
    """Ban gravado no log."""

    ban_id: str
    user: str
    moderator: str
    reason: str
    duration: str
    subreddit: str
    timestamp: int


class RecentBansResponse(BaseModel):
    """Bans mais recentes + marcadores do backfill."""

    subreddit: str | None
    bans: list[BanItem]
    initialized_at: int | None = None
    backfill_count: int | None = None


def _get_log_store():
    from app.bootstrap.dependencies import get_log_store

    return get_log_store()


@router.get("/recent", response_model=None)
async def recent_bans(
    subreddit: str | None = Query(default=None),
    limit: int = Query(default=25, ge=1, le=MAX_RECENT_LIMIT),
) -> RecentBansResponse | JSONResponse:
    """Lista os bans mais recentes (global ou de um subreddit)."""
    store = _get_log_store()
    try:
        ban_ids = await store.recent_ban_ids(subreddit, limit)
        bans = []
        for ban_id in ban_ids:
            ban = await store.get_ban(ban_id)
            if ban is not None:
                bans.append(ban)
        markers = await store.get_backfill_markers()
    except RedisConnectionError:
        logger.exception("recent_bans_read_failed", extra={"subreddit": subreddit})
        return JSONResponse(content={"error": "log_store_unavailable"}, status_code=503)

    return RecentBansResponse(
        subreddit=subreddit,
        bans=[
            BanItem(
                ban_id=ban.ban_id,
                user=ban.user,
                moderator=ban.moderator,
                reason=ban.reason,
                duration=ban.duration,
                subreddit=ban.subreddit,
                timestamp=ban.timestamp,
            )
            for ban in bans
        ],
        initialized_at=markers.initialized_at,
        backfill_count=markers.backfill_count,
    )
