"""Settings da integração com a API de contatos Systeme.io.

Diferente das settings base, estas NÃO são cacheadas: a API key é lida
do ambiente a cada requisição e injetada no handler via dependência.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

SYSTEME_API_BASE_URL: str = "https://api.systeme.io"
CONTACTS_PATH: str = "/api/contacts"

# Tag aplicada a todo contato criado pelo formulário do site
DEFAULT_SUBSCRIBER_TAG_ID: int = 1
DEFAULT_CONTACT_LANGUAGE: str = "en"


@dataclass(frozen=True)
class SystemeSettings:
    """Configurações da API Systeme.io.

    Attributes:
        api_key: Secret enviado no header X-API-Key
        api_base_url: URL base da API
        contact_language: Código de idioma gravado no contato
        subscriber_tag_id: ID fixo da tag aplicada na criação
        request_timeout_seconds: Timeout da chamada HTTP
    """

    api_key: str = ""
    api_base_url: str = SYSTEME_API_BASE_URL
    contact_language: str = DEFAULT_CONTACT_LANGUAGE
    subscriber_tag_id: int = DEFAULT_SUBSCRIBER_TAG_ID
    request_timeout_seconds: float = 10.0
    # Variáveis presentes no ambiente mas com valor não numérico
    invalid_env_vars: tuple[str, ...] = ()

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key and self.api_key.strip())

    @property
    def contacts_endpoint(self) -> str:
        """URL completa do endpoint de criação de contatos."""
        return f"{self.api_base_url.rstrip('/')}{CONTACTS_PATH}"

    def validate(self) -> list[str]:
        """Valida configurações mínimas da integração.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.has_api_key:
            errors.append("SYSTEME_API_KEY não configurado")

        errors.extend(f"{name} inválido (não numérico)" for name in self.invalid_env_vars)

        if self.subscriber_tag_id <= 0:
            errors.append("SYSTEME_SUBSCRIBER_TAG_ID deve ser > 0")

        if self.request_timeout_seconds <= 0:
            errors.append("SYSTEME_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _read_number(
    name: str,
    default: int | float,
    parse: type[int] | type[float],
    invalid: list[str],
) -> int | float:
    """Lê variável numérica; valor inválido cai no default e é registrado."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return parse(raw.strip())
    except ValueError:
        invalid.append(name)
        return default


def load_systeme_settings() -> SystemeSettings:
    """Carrega SystemeSettings a partir de variáveis de ambiente.

    Nunca levanta exceção: valores numéricos inválidos ficam em
    `invalid_env_vars` e são reportados por `validate()`.
    """
    invalid: list[str] = []
    subscriber_tag_id = _read_number(
        "SYSTEME_SUBSCRIBER_TAG_ID", DEFAULT_SUBSCRIBER_TAG_ID, int, invalid
    )
    request_timeout_seconds = _read_number(
        "SYSTEME_REQUEST_TIMEOUT_SECONDS", 10.0, float, invalid
    )
    return SystemeSettings(
        api_key=os.getenv("SYSTEME_API_KEY", ""),
        api_base_url=os.getenv("SYSTEME_API_BASE_URL", SYSTEME_API_BASE_URL),
        contact_language=os.getenv("SYSTEME_CONTACT_LANGUAGE", DEFAULT_CONTACT_LANGUAGE),
        subscriber_tag_id=int(subscriber_tag_id),
        request_timeout_seconds=float(request_timeout_seconds),
        invalid_env_vars=tuple(invalid),
    )


def get_systeme_settings() -> SystemeSettings:
    """Retorna SystemeSettings lidas do ambiente a cada chamada.

    Usada como dependência FastAPI; testes substituem via dependency_overrides.
    """
    return load_systeme_settings()
