"""Settings do Reddit: leitura do mod log para backfill e enriquecimento."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

REDDIT_API_BASE_URL: str = "https://oauth.reddit.com"
REDDIT_PAGE_SIZE: int = 100


@dataclass(frozen=True)
class RedditSettings:
    """Configurações de acesso ao mod log do Reddit.

    Attributes:
        api_base_url: URL base da API OAuth do Reddit
        access_token: Bearer token com escopo modlog
        user_agent: User-Agent exigido pela API do Reddit
        request_timeout_seconds: Timeout por página
        backfill_limit: Máximo de entradas importadas na instalação
        enrichment_window: Entradas recentes consultadas para enriquecer um ban
    """

    api_base_url: str = REDDIT_API_BASE_URL
    access_token: str = ""
    user_agent: str = "ban-bunny/1.0"

    request_timeout_seconds: float = 15.0

    backfill_limit: int = 500
    enrichment_window: int = 10

    @property
    def page_size(self) -> int:
        """Tamanho de página aceito pela API (máx. 100)."""
        return REDDIT_PAGE_SIZE

    def get_mod_log_endpoint(self, subreddit: str) -> str:
        """Retorna URL do mod log do subreddit.

        Raises:
            ValueError: Se subreddit vazio.
        """
        if not subreddit:
            raise ValueError("subreddit é obrigatório")
        return f"{self.api_base_url}/r/{subreddit}/about/log"

    def validate(self) -> list[str]:
        """Valida configurações do Reddit.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.access_token:
            errors.append("REDDIT_ACCESS_TOKEN não configurado")

        if not self.user_agent:
            errors.append("REDDIT_USER_AGENT não pode ser vazio")

        if self.request_timeout_seconds <= 0:
            errors.append("REDDIT_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.backfill_limit <= 0:
            errors.append("BACKFILL_LIMIT deve ser > 0")

        if self.enrichment_window <= 0:
            errors.append("ENRICHMENT_WINDOW deve ser > 0")

        return errors


def _load_from_env() -> RedditSettings:
    """Carrega RedditSettings a partir de variáveis de ambiente."""
    return RedditSettings(
        api_base_url=os.getenv("REDDIT_API_BASE_URL", REDDIT_API_BASE_URL),
        access_token=os.getenv("REDDIT_ACCESS_TOKEN", ""),
        user_agent=os.getenv("REDDIT_USER_AGENT", "ban-bunny/1.0"),
        request_timeout_seconds=float(os.getenv("REDDIT_REQUEST_TIMEOUT_SECONDS", "15")),
        backfill_limit=int(os.getenv("BACKFILL_LIMIT", "500")),
        enrichment_window=int(os.getenv("ENRICHMENT_WINDOW", "10")),
    )


@lru_cache(maxsize=1)
def get_reddit_settings() -> RedditSettings:
    """Retorna instância cacheada de RedditSettings."""
    return _load_from_env()
