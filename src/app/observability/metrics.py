"""Registro de métricas via structured logging.

As métricas são logs estruturados agregados depois pelo backend de logs
(ex: Cloud Logging, CloudWatch Insights).

Métricas suportadas:
- Latência: tempo da chamada upstream por operação
- Outcome: contador de resultados do fluxo de inscrição

Uso:
    start = time.perf_counter()
    # ... chamada upstream ...
    record_latency("systeme", "create_contact", (time.perf_counter() - start) * 1000)
    record_subscription_outcome("subscribed", status_code=200)
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "systeme")
        operation: Nome da operação (ex: "create_contact")
        latency_ms: Latência em milissegundos
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
        },
    )


def record_subscription_outcome(outcome: str, status_code: int) -> None:
    """Registra o resultado final de uma inscrição.

    Args:
        outcome: subscribed | already_subscribed | rejected | failed
        status_code: Status HTTP devolvido ao cliente
    """
    logger.info(
        "metric_subscription_outcome",
        extra={
            "metric_type": "counter",
            "outcome": outcome,
            "status_code": status_code,
        },
    )
