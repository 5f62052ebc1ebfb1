"""Configuração centralizada de logging estruturado JSON.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização do serviço (app/bootstrap/)
    configure_logging(level="INFO", service_name="newsletter-subscribe")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("contact_created", extra={"status_code": 201})
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import RequestContextFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "newsletter-subscribe"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    environment: str = "development",
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging JSON no root logger.

    Deve ser chamada uma vez na inicialização (app/bootstrap/).

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço para identificação nos logs.
        environment: Ambiente de execução injetado em cada record.
        correlation_id_getter: Função que retorna o correlation_id do
            contexto atual (ex: de ContextVar).

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(
        RequestContextFilter(service_name, environment, correlation_id_getter)
    )

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado."""
    return logging.getLogger(name)


def log_upstream_failure(
    logger: logging.Logger,
    operation: str,
    status_code: int | None = None,
    reason: str | None = None,
) -> None:
    """Log padronizado de falha na API upstream (sem PII).

    Args:
        logger: Logger instance.
        operation: Operação upstream (ex: "create_contact").
        status_code: Status HTTP retornado, quando houver.
        reason: Mensagem do upstream ou tipo da exceção.
    """
    extra: dict[str, object] = {
        "upstream_failure": True,
        "operation": operation,
    }
    if status_code is not None:
        extra["status_code"] = status_code
    if reason:
        extra["reason"] = reason

    logger.warning("Upstream failure on %s", operation, extra=extra)
