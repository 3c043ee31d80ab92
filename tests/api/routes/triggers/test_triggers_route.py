"""Testes dos endpoints de trigger da plataforma."""

from __future__ import annotations

import json
from typing import Any

import pytest
from starlette.requests import Request

from api.normalizers.reddit import create_reddit_normalizer
from api.routes.triggers import router as triggers
from app.domain.installation import InstallationConfig
from app.infra.stores.memory_stores import MemoryLogStore
from app.observability import get_correlation_id
from app.use_cases.reddit import (
    BackfillBanHistoryUseCase,
    BackfillResult,
    BackfillState,
    ProcessModActionUseCase,
)
from tests.fakes.fake_moderation import (
    FakeModLogSource,
    RecordingDispatcher,
    StaticGifLookup,
    mod_log_entry,
)


def _build_request(body: bytes, headers: dict[str, str] | None = None) -> Request:
    raw_headers = [
        (k.lower().encode("utf-8"), v.encode("utf-8")) for k, v in (headers or {}).items()
    ]
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "POST",
        "path": "/",
        "raw_path": b"/",
        "query_string": b"",
        "headers": raw_headers,
    }
    sent = False

    async def _receive() -> dict[str, object]:
        nonlocal sent
        if sent:
            return {"type": "http.request", "body": b"", "more_body": False}
        sent = True
        return {"type": "http.request", "body": body, "more_body": False}

    return Request(scope, _receive)


def _json_request(payload: Any, headers: dict[str, str] | None = None) -> Request:
    return _build_request(json.dumps(payload).encode("utf-8"), headers)


class _StaticInstallationSettings:
    def __init__(self, config: InstallationConfig) -> None:
        self.config = config
        self.requested: list[str] = []

    async def get(self, subreddit: str) -> InstallationConfig:
        self.requested.append(subreddit)
        return self.config


class _ExplodingUseCase:
    async def execute(self, *args: Any) -> Any:
        raise RuntimeError("boom")


@pytest.fixture
def store() -> MemoryLogStore:
    return MemoryLogStore()


@pytest.fixture
def dispatcher() -> RecordingDispatcher:
    return RecordingDispatcher()


@pytest.fixture
def wired(
    monkeypatch: pytest.MonkeyPatch,
    store: MemoryLogStore,
    dispatcher: RecordingDispatcher,
) -> _StaticInstallationSettings:
    settings = _StaticInstallationSettings(
        InstallationConfig(webhook_url="https://discord.test/hook", gif_api_key="k")
    )
    monkeypatch.setattr(
        triggers,
        "_mod_action_use_case",
        ProcessModActionUseCase(
            normalizer=create_reddit_normalizer(),
            log_store=store,
            gif_lookup=StaticGifLookup(),
            dispatcher=dispatcher,
        ),
    )
    monkeypatch.setattr(
        triggers,
        "_backfill_use_case",
        BackfillBanHistoryUseCase(
            normalizer=create_reddit_normalizer(),
            log_store=store,
            mod_log_source=FakeModLogSource([mod_log_entry("b1", "troll")]),
        ),
    )
    monkeypatch.setattr(triggers, "_installation_settings", settings)
    return settings


@pytest.mark.asyncio
async def test_mod_action_ban_is_stored_and_notified(
    wired: _StaticInstallationSettings,
    store: MemoryLogStore,
    dispatcher: RecordingDispatcher,
) -> None:
    request = _json_request(
        {
            "action": "banuser",
            "actionId": "ModAction_1",
            "targetUser": {"name": "spammer"},
            "moderator": {"name": "alice"},
            "subreddit": {"name": "test"},
            "details": "spam",
        },
        headers={"x-correlation-id": "corr-1"},
    )

    response = await triggers.mod_action(request)

    assert response.status == "ban"
    assert response.record_id == "ModAction_1"
    assert response.stored is True
    assert response.notified is True
    assert response.correlation_id == "corr-1"
    assert wired.requested == ["test"]
    assert "ban:ModAction_1" in store.hashes
    assert len(dispatcher.sent) == 1
    assert get_correlation_id() == ""


@pytest.mark.asyncio
async def test_mod_action_generates_correlation_id(wired: _StaticInstallationSettings) -> None:
    response = await triggers.mod_action(_json_request({"action": "unbanuser"}))

    assert response.status == "skipped"
    assert response.correlation_id


@pytest.mark.asyncio
async def test_mod_action_invalid_json_returns_400(wired: _StaticInstallationSettings) -> None:
    response = await triggers.mod_action(_build_request(b"{not json"))

    assert response.status_code == 400
    assert response.body == b"Bad Request"


@pytest.mark.asyncio
async def test_mod_action_non_object_returns_400(wired: _StaticInstallationSettings) -> None:
    response = await triggers.mod_action(_json_request(["banuser"]))

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_mod_action_failure_is_reported_not_raised(
    monkeypatch: pytest.MonkeyPatch,
    wired: _StaticInstallationSettings,
) -> None:
    monkeypatch.setattr(triggers, "_mod_action_use_case", _ExplodingUseCase())

    response = await triggers.mod_action(_json_request({"action": "banuser"}))

    assert response.status == "failed"


@pytest.mark.asyncio
async def test_app_install_runs_backfill(
    wired: _StaticInstallationSettings,
    store: MemoryLogStore,
    dispatcher: RecordingDispatcher,
) -> None:
    response = await triggers.app_install(_json_request({"subreddit": {"name": "test"}}))

    assert response.status == BackfillState.DONE.value
    assert response.imported == 1
    assert store.scalars["app:backfillCount"] == "1"
    assert dispatcher.sent == []


@pytest.mark.asyncio
async def test_app_install_without_subreddit_is_aborted(
    wired: _StaticInstallationSettings,
    store: MemoryLogStore,
) -> None:
    response = await triggers.app_install(_json_request({}))

    assert response.status == BackfillState.ABORTED.value
    assert store.scalars == {}


@pytest.mark.asyncio
async def test_app_install_invalid_body_returns_400(wired: _StaticInstallationSettings) -> None:
    response = await triggers.app_install(_json_request({"subreddit": "not-an-object"}))

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_app_install_passes_subreddit_to_use_case(
    monkeypatch: pytest.MonkeyPatch,
    wired: _StaticInstallationSettings,
) -> None:
    received: list[str | None] = []

    class _RecordingBackfill:
        async def execute(self, subreddit: str | None) -> BackfillResult:
            received.append(subreddit)
            return BackfillResult(subreddit=subreddit or "", state=BackfillState.DONE)

    monkeypatch.setattr(triggers, "_backfill_use_case", _RecordingBackfill())

    await triggers.app_install(_json_request({"subreddit": {"name": "mysub", "id": "t5_1"}}))

    assert received == ["mysub"]


@pytest.mark.asyncio
async def test_app_upgrade_is_a_noop(
    wired: _StaticInstallationSettings,
    store: MemoryLogStore,
) -> None:
    response = await triggers.app_upgrade(_json_request({"subreddit": {"name": "test"}}))

    assert response.status == "ok"
    assert store.hashes == {}
