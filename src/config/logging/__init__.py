"""Configuração de logging estruturado.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="newsletter-subscribe")
    logger = get_logger(__name__)

Campos obrigatórios em todo log:
- asctime, level, logger, message
- correlation_id, service, environment

Logs estruturados, sem PII (email do inscrito nunca é logado).
"""

from config.logging.config import (
    configure_logging,
    get_logger,
    log_upstream_failure,
)
from config.logging.filters import RequestContextFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "RequestContextFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "log_upstream_failure",
]
