"""Protocolo da fonte de mod log (paginação de histórico)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from collections.abc import AsyncIterator


class ModLogSourceProtocol(Protocol):
    """Contrato mínimo para ler o mod log de um subreddit.

    Entradas são devolvidas cruas, na ordem entregue pela fonte;
    a normalização é responsabilidade do chamador.
    """

    def iter_entries(
        self,
        subreddit: str,
        *,
        action_type: str,
        limit: int,
    ) -> AsyncIterator[dict[str, Any]]: ...
