"""Filters de logging para injeção de contexto.

Campos injetados em todo record:
- correlation_id: ID de rastreamento da requisição
- service: nome do serviço
- environment: ambiente de execução

Nunca adicionar email do inscrito ou payloads brutos nos logs.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


class RequestContextFilter(logging.Filter):
    """Enriquece cada record com service, environment e correlation_id.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        environment: Ambiente (development|staging|production).
        correlation_id_getter: Função que retorna o correlation_id atual.
            Se não fornecida, usa string vazia.
    """

    def __init__(
        self,
        service_name: str,
        environment: str = "development",
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._environment = environment
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        """Adiciona contexto ao record sem filtrar nada.

        correlation_id passado explicitamente via `extra` é preservado.
        """
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing or self._get_correlation_id()
        record.service = self._service_name
        record.environment = self._environment
        return True
