"""Settings do backend do log de moderação."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from config.settings.base.core import BaseSettings

LogStoreBackend = Literal["memory", "redis"]


@dataclass(frozen=True)
class LogStoreSettings:
    """Configurações do Log Store.

    Attributes:
        backend: Backend de persistência (memory|redis)
    """

    backend: LogStoreBackend = "memory"

    def validate(self, base: BaseSettings) -> list[str]:
        """Valida o backend contra o ambiente.

        Args:
            base: BaseSettings para verificar ambiente e REDIS_URL.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.backend not in ("memory", "redis"):
            errors.append(f"LOG_STORE_BACKEND inválido: {self.backend}")

        if self.backend == "memory" and not base.is_development:
            errors.append(
                "LOG_STORE_BACKEND=memory proibido em staging/production. Use Redis."
            )

        if self.backend == "redis" and not base.redis_url:
            errors.append("LOG_STORE_BACKEND=redis requer REDIS_URL configurado")

        return errors


def _load_log_store_from_env() -> LogStoreSettings:
    """Carrega LogStoreSettings de variáveis de ambiente."""
    backend_str = os.getenv("LOG_STORE_BACKEND", "memory").lower()
    backend: LogStoreBackend = "redis" if backend_str == "redis" else "memory"
    return LogStoreSettings(backend=backend)


@lru_cache(maxsize=1)
def get_log_store_settings() -> LogStoreSettings:
    """Retorna instância cacheada de LogStoreSettings."""
    return _load_log_store_from_env()
