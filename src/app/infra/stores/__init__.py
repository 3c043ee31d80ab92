"""Stores — implementações concretas de persistência.

Módulos disponíveis:
    - redis_log_store: Log de moderação em Redis
    - memory_stores: Stores em memória para desenvolvimento/testes
"""

from __future__ import annotations

from app.infra.stores.memory_stores import MemoryLogStore
from app.infra.stores.redis_log_store import RedisLogStore

__all__ = [
    "MemoryLogStore",
    "RedisLogStore",
]
