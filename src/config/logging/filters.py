"""Filter de logging que injeta contexto de rastreamento.

Campos injetados:
- correlation_id: ID do trigger em processamento
- service: nome do serviço
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Nunca adicionar webhook URLs ou API keys aos logs; são segredos
    da instalação.

    Args:
        service_name: Nome do serviço.
        correlation_id_getter: Função que retorna o correlation_id atual.
            Sem ela, usa string vazia.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        """Enriquece o record; nunca descarta.

        correlation_id passado explicitamente via `extra` é preservado.
        """
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True
