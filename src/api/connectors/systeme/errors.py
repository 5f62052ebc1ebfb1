"""Erros e helpers de parsing para a API de contatos Systeme.io."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# Status que por si só indicam contato duplicado
DUPLICATE_STATUS_CODES = frozenset({409, 422})

DUPLICATE_MARKERS = ("already exists", "already used")


@dataclass(frozen=True)
class SystemeApiError:
    """Erro retornado pela API Systeme.io."""

    status_code: int
    message: str | None
    is_duplicate: bool  # True se o contato já existe no upstream


def extract_error_message(data: dict[str, Any]) -> str | None:
    """Retorna `message` ou `detail` do corpo de erro, se presentes."""
    for key in ("message", "detail"):
        value = data.get(key)
        if isinstance(value, str) and value.strip():
            return value
    return None


def _violation_messages(data: dict[str, Any]) -> list[str]:
    # Erros de validação (422) trazem violations[{propertyPath, message}]
    violations = data.get("violations")
    if not isinstance(violations, list):
        return []
    return [
        item["message"]
        for item in violations
        if isinstance(item, dict) and isinstance(item.get("message"), str)
    ]


def is_duplicate_contact_error(status_code: int, data: dict[str, Any]) -> bool:
    """Classifica resposta de erro como contato duplicado.

    Duplicado quando:
    - status 409 ou 422 (qualquer corpo)
    - message/detail/violations contém "already exists" ou "already used"
    """
    if status_code in DUPLICATE_STATUS_CODES:
        return True

    candidates = [data.get("message"), data.get("detail"), *_violation_messages(data)]
    for text in candidates:
        if not isinstance(text, str):
            continue
        lowered = text.lower()
        if any(marker in lowered for marker in DUPLICATE_MARKERS):
            return True
    return False


def parse_systeme_error(status_code: int, data: dict[str, Any]) -> SystemeApiError:
    """Monta SystemeApiError a partir de uma resposta não-2xx.

    Args:
        status_code: Status HTTP do upstream
        data: Corpo JSON da resposta ({} se não-JSON)

    Returns:
        SystemeApiError classificado
    """
    return SystemeApiError(
        status_code=status_code,
        message=extract_error_message(data),
        is_duplicate=is_duplicate_contact_error(status_code, data),
    )
