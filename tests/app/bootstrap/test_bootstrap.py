"""Testes do composition root."""

from __future__ import annotations

import pytest

import app.bootstrap as bootstrap
from app.bootstrap import dependencies
from app.infra.stores import MemoryLogStore, RedisLogStore
from app.use_cases.reddit import BackfillBanHistoryUseCase, ProcessModActionUseCase
from config.settings import (
    BaseSettings,
    LogStoreSettings,
    NotificationSettings,
    RedditSettings,
)


def _patch_settings(
    monkeypatch: pytest.MonkeyPatch,
    module: object,
    *,
    base: BaseSettings,
    log_store: LogStoreSettings,
    reddit: RedditSettings | None = None,
) -> None:
    monkeypatch.setattr(module, "get_base_settings", lambda: base)
    monkeypatch.setattr(module, "get_log_store_settings", lambda: log_store)
    monkeypatch.setattr(module, "get_notification_settings", lambda: NotificationSettings())
    monkeypatch.setattr(module, "get_reddit_settings", lambda: reddit or RedditSettings())


class TestValidateRuntimeSettings:
    """Validação no startup."""

    def test_development_only_warns(self, monkeypatch: pytest.MonkeyPatch) -> None:
        _patch_settings(
            monkeypatch,
            bootstrap,
            base=BaseSettings(environment="development"),
            log_store=LogStoreSettings(backend="memory"),
        )

        bootstrap.validate_runtime_settings()

    def test_production_fails_fast(self, monkeypatch: pytest.MonkeyPatch) -> None:
        _patch_settings(
            monkeypatch,
            bootstrap,
            base=BaseSettings(environment="production"),
            log_store=LogStoreSettings(backend="memory"),
        )

        with pytest.raises(RuntimeError, match="Configuração inválida para production"):
            bootstrap.validate_runtime_settings()

    def test_production_with_valid_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        _patch_settings(
            monkeypatch,
            bootstrap,
            base=BaseSettings(environment="production", redis_url="redis://localhost:6379/0"),
            log_store=LogStoreSettings(backend="redis"),
            reddit=RedditSettings(access_token="tok"),
        )

        bootstrap.validate_runtime_settings()


class TestFactories:
    """Factories de stores e use cases."""

    def test_memory_backend(self, monkeypatch: pytest.MonkeyPatch) -> None:
        _patch_settings(
            monkeypatch,
            dependencies,
            base=BaseSettings(),
            log_store=LogStoreSettings(backend="memory"),
        )

        assert isinstance(dependencies.create_log_store(), MemoryLogStore)

    def test_redis_backend(self, monkeypatch: pytest.MonkeyPatch) -> None:
        _patch_settings(
            monkeypatch,
            dependencies,
            base=BaseSettings(redis_key_prefix="test:"),
            log_store=LogStoreSettings(backend="redis"),
        )
        monkeypatch.setattr(dependencies, "create_async_redis_client", lambda: object())

        store = dependencies.create_log_store()

        assert isinstance(store, RedisLogStore)
        assert store._key("bans:timeline") == "test:bans:timeline"

    def test_use_case_factories(self, monkeypatch: pytest.MonkeyPatch) -> None:
        _patch_settings(
            monkeypatch,
            dependencies,
            base=BaseSettings(),
            log_store=LogStoreSettings(backend="memory"),
        )
        store = MemoryLogStore()
        monkeypatch.setattr(dependencies, "get_log_store", lambda: store)

        assert isinstance(dependencies.create_process_mod_action(), ProcessModActionUseCase)
        assert isinstance(dependencies.create_backfill_ban_history(), BackfillBanHistoryUseCase)
