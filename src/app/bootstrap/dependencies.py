"""Factories de stores, connectors e use cases (composition root).

Os use cases são montados a partir de settings de ambiente; cada
dependência é um protocolo, então testes podem injetar fakes.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from api.connectors.discord import create_discord_webhook_client
from api.connectors.giphy import create_giphy_client
from api.connectors.reddit import create_reddit_mod_log_client
from api.normalizers.reddit import create_reddit_normalizer
from app.bootstrap.clients import create_async_redis_client
from app.infra.secrets import EnvInstallationSettings
from app.infra.stores import MemoryLogStore, RedisLogStore
from app.use_cases.reddit import BackfillBanHistoryUseCase, ProcessModActionUseCase
from config.settings import (
    get_base_settings,
    get_log_store_settings,
    get_notification_settings,
    get_reddit_settings,
)

if TYPE_CHECKING:
    from app.protocols.installation_settings import InstallationSettingsProtocol
    from app.protocols.log_store import LogStoreProtocol

logger = logging.getLogger(__name__)


def create_log_store() -> LogStoreProtocol:
    """Cria Log Store conforme LOG_STORE_BACKEND."""
    base = get_base_settings()
    backend = get_log_store_settings().backend

    if backend == "redis":
        store = RedisLogStore(create_async_redis_client(), key_prefix=base.redis_key_prefix)
        logger.info("log_store_created", extra={"backend": "redis"})
        return store

    if not base.is_development:
        logger.warning(
            "memory_store_in_non_dev",
            extra={"backend": "memory", "environment": base.environment},
        )
    logger.info("log_store_created", extra={"backend": "memory"})
    return MemoryLogStore()


@lru_cache(maxsize=1)
def get_log_store() -> LogStoreProtocol:
    """Obtém Log Store (singleton; o backend em memória depende disso)."""
    return create_log_store()


def create_installation_settings() -> InstallationSettingsProtocol:
    """Provider de configuração por instalação."""
    return EnvInstallationSettings(get_notification_settings())


def create_process_mod_action() -> ProcessModActionUseCase:
    """Monta o use case do trigger ModAction."""
    reddit = get_reddit_settings()
    return ProcessModActionUseCase(
        normalizer=create_reddit_normalizer(),
        log_store=get_log_store(),
        gif_lookup=create_giphy_client(),
        dispatcher=create_discord_webhook_client(),
        mod_log_source=create_reddit_mod_log_client(reddit) if reddit.access_token else None,
        enrichment_window=reddit.enrichment_window,
    )


def create_backfill_ban_history() -> BackfillBanHistoryUseCase:
    """Monta o use case do trigger AppInstall."""
    reddit = get_reddit_settings()
    return BackfillBanHistoryUseCase(
        normalizer=create_reddit_normalizer(),
        log_store=get_log_store(),
        mod_log_source=create_reddit_mod_log_client(reddit),
        limit=reddit.backfill_limit,
    )
