"""Bootstrap da aplicação — inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings no
startup e expõe as factories que conectam implementações aos protocolos.

Uso:
    from app.bootstrap import initialize_app

    # Na inicialização do serviço
    initialize_app()
"""

from __future__ import annotations

import logging
import os

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_base_settings, load_systeme_settings

# Nível de log padrão (pode ser sobrescrito por env)
DEFAULT_LOG_LEVEL = "INFO"
STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa logging estruturado JSON com correlation_id.

    Deve ser chamada uma vez no início do serviço.
    """
    base = get_base_settings()
    configure_logging(
        level=os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        service_name=base.service_name,
        environment=base.environment,
        correlation_id_getter=get_correlation_id,
    )


def initialize_test_app() -> None:
    """Inicializa a aplicação para testes (nível DEBUG)."""
    base = get_base_settings()
    configure_logging(
        level="DEBUG",
        service_name=f"{base.service_name}_test",
        environment=base.environment,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings no startup.

    Erros de settings base bloqueiam o boot em `staging`/`production`.
    Problemas na integração Systeme só geram alerta: a API key é relida a
    cada requisição e a ausência dela já responde 500 no endpoint.
    """
    base = get_base_settings()
    strict_mode = base.environment in STRICT_VALIDATION_ENVS

    base_errors = [f"base: {error}" for error in base.validate()]
    systeme_errors = [f"systeme: {error}" for error in load_systeme_settings().validate()]
    errors = base_errors + systeme_errors

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode and base_errors:
        details = "\n".join(f"- {error}" for error in base_errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")
