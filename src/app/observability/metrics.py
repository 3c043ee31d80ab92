"""Registro de métricas via structured logging.

As métricas saem como logs JSON e são agregadas fora do serviço.

Uso:
    start = time.perf_counter()
    # ... processamento do trigger ...
    record_latency("triggers", "mod_action", (time.perf_counter() - start) * 1000)
    record_trigger_outcome("mod_action", "ban", stored=True, notified=True)
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "triggers")
        operation: Nome da operação (ex: "app_install", "mod_action")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação para rastreamento
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "correlation_id": correlation_id,
        },
    )


def record_trigger_outcome(
    trigger: str,
    outcome: str,
    *,
    stored: bool,
    notified: bool = False,
    correlation_id: str | None = None,
) -> None:
    """Registra o desfecho de um trigger (counter por outcome).

    Args:
        trigger: Nome do trigger (ex: "mod_action")
        outcome: Desfecho (ex: "ban", "mod_action", "skipped", "done", "aborted")
        stored: Se algo foi gravado no log
        notified: Se uma notificação foi entregue
        correlation_id: ID de correlação para rastreamento
    """
    logger.info(
        "metric_trigger_outcome",
        extra={
            "metric_type": "counter",
            "component": "triggers",
            "trigger": trigger,
            "outcome": outcome,
            "stored": stored,
            "notified": notified,
            "correlation_id": correlation_id,
        },
    )
