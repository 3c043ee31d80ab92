"""Testes do use case de backfill na instalação."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from api.normalizers.reddit import create_reddit_normalizer
from app.infra.stores.memory_stores import MemoryLogStore
from app.use_cases.reddit import BackfillBanHistoryUseCase, BackfillState
from tests.fakes.fake_moderation import FakeModLogSource, mod_log_entry
from utils.errors import RedisConnectionError

FINISHED_AT = 1_704_067_200_000


def _use_case(
    source: FakeModLogSource,
    store: MemoryLogStore | None = None,
    limit: int = 500,
) -> tuple[BackfillBanHistoryUseCase, MemoryLogStore]:
    store = store or MemoryLogStore()
    use_case = BackfillBanHistoryUseCase(
        normalizer=create_reddit_normalizer(),
        log_store=store,
        mod_log_source=source,
        limit=limit,
        clock=lambda: FINISHED_AT,
    )
    return use_case, store


@pytest.mark.asyncio
async def test_imports_bans_and_writes_markers() -> None:
    source = FakeModLogSource(
        [
            mod_log_entry("b1", "troll", created_utc=1_600_000_000),
            mod_log_entry("b2", "AutoModerator"),
            mod_log_entry("b3", "spammer", description="7", created_utc=1_600_000_100),
        ]
    )
    use_case, store = _use_case(source)

    result = await use_case.execute("test")

    assert result.state is BackfillState.DONE
    assert result.imported == 2
    assert result.skipped == 1
    assert store.index_members("bans:subreddit:test") == ["b1", "b3"]
    assert store.hashes["ban:b1"]["timestamp"] == "1600000000000"
    assert store.hashes["ban:b3"]["duration"] == "7"
    assert store.scalars["app:backfillCount"] == "2"
    assert store.scalars["app:initialized"] == str(FINISHED_AT)
    assert source.calls == [{"subreddit": "test", "action_type": "banuser", "limit": 500}]


@pytest.mark.asyncio
async def test_unbans_are_skipped() -> None:
    source = FakeModLogSource([mod_log_entry("u1", "troll", action="unbanuser")])
    use_case, store = _use_case(source)

    result = await use_case.execute("test")

    assert result.imported == 0
    assert store.hashes == {}
    assert store.scalars["app:backfillCount"] == "0"


@pytest.mark.asyncio
async def test_respects_limit() -> None:
    source = FakeModLogSource([mod_log_entry(f"b{i}", f"user{i}") for i in range(5)])
    use_case, _ = _use_case(source, limit=3)

    result = await use_case.execute("test")

    assert result.imported == 3


@pytest.mark.asyncio
async def test_missing_subreddit_aborts_without_io() -> None:
    source = FakeModLogSource([mod_log_entry("b1", "troll")])
    use_case, store = _use_case(source)

    result = await use_case.execute(None)

    assert result.state is BackfillState.ABORTED
    assert source.calls == []
    assert store.scalars == {}


@pytest.mark.asyncio
async def test_source_failure_keeps_partial_import_without_markers() -> None:
    source = FakeModLogSource(
        [mod_log_entry("b1", "troll"), mod_log_entry("b2", "spammer")],
        fail_after=1,
    )
    use_case, store = _use_case(source)

    result = await use_case.execute("test")

    assert result.state is BackfillState.ABORTED
    assert result.imported == 1
    assert result.error == "ModLogUnavailableError"
    assert "ban:b1" in store.hashes
    assert store.scalars == {}


@pytest.mark.asyncio
async def test_store_failure_aborts() -> None:
    store = MemoryLogStore()
    store.put_ban = AsyncMock(side_effect=RedisConnectionError("down"))  # type: ignore[method-assign]
    use_case, _ = _use_case(FakeModLogSource([mod_log_entry("b1", "troll")]), store)

    result = await use_case.execute("test")

    assert result.state is BackfillState.ABORTED
    assert result.error == "RedisConnectionError"
    assert store.scalars == {}
