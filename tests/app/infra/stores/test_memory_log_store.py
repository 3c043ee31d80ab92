"""Testes do MemoryLogStore."""

from __future__ import annotations

import pytest

from app.domain.moderation_log import BanRecord, ModActionRecord
from app.infra.stores.memory_stores import MemoryLogStore


def _ban(ban_id: str, timestamp: int, subreddit: str = "test") -> BanRecord:
    return BanRecord(
        ban_id=ban_id,
        user=f"user-{ban_id}",
        moderator="alice",
        reason="",
        duration="permanent",
        subreddit=subreddit,
        timestamp=timestamp,
    )


@pytest.mark.asyncio
async def test_put_ban_indexes_timeline_and_subreddit() -> None:
    store = MemoryLogStore()

    await store.put_ban(_ban("b1", 100))

    assert store.hashes["ban:b1"]["user"] == "user-b1"
    assert store.index_members("bans:timeline") == ["b1"]
    assert store.index_members("bans:subreddit:test") == ["b1"]


@pytest.mark.asyncio
async def test_put_ban_twice_is_idempotent() -> None:
    store = MemoryLogStore()
    record = _ban("b1", 100)

    await store.put_ban(record)
    snapshot = (dict(store.hashes), {k: dict(v) for k, v in store.indexes.items()})
    await store.put_ban(record)

    assert (store.hashes, store.indexes) == snapshot


@pytest.mark.asyncio
async def test_timeline_is_ordered_by_timestamp() -> None:
    store = MemoryLogStore()

    await store.put_ban(_ban("late", 300))
    await store.put_ban(_ban("early", 100))
    await store.put_ban(_ban("middle", 200, subreddit="other"))

    assert store.index_members("bans:timeline") == ["early", "middle", "late"]
    assert await store.recent_ban_ids() == ["late", "middle", "early"]
    assert await store.recent_ban_ids("test", limit=1) == ["late"]


@pytest.mark.asyncio
async def test_put_mod_action_uses_modlog_keys() -> None:
    store = MemoryLogStore()
    record = ModActionRecord(
        log_id="m1",
        action="removecomment",
        target_user="bob",
        moderator="alice",
        details="",
        subreddit="test",
        timestamp=50,
    )

    await store.put_mod_action(record)

    assert store.hashes["modlog:m1"]["action"] == "removecomment"
    assert store.index_members("modlogs:timeline") == ["m1"]
    assert await store.get_mod_action("m1") == record
    assert "bans:timeline" not in store.indexes


@pytest.mark.asyncio
async def test_backfill_markers_roundtrip() -> None:
    store = MemoryLogStore()
    assert (await store.get_backfill_markers()).is_complete is False

    await store.mark_backfill_complete(1_700_000_000_000, 3)

    assert store.scalars == {"app:initialized": "1700000000000", "app:backfillCount": "3"}
    markers = await store.get_backfill_markers()
    assert markers.backfill_count == 3
