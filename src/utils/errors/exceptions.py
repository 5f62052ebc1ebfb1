"""Exceções do fluxo de inscrição.

Cada exceção carrega o status HTTP e a mensagem pública segura para o
cliente. Detalhes técnicos ficam apenas nos logs.
"""

from __future__ import annotations

DEFAULT_UNEXPECTED_MESSAGE = "An unexpected error occurred. Please try again."
DEFAULT_UPSTREAM_MESSAGE = "Failed to subscribe. Please try again."


class SubscriptionError(Exception):
    """Base para falhas mapeadas em resposta HTTP."""

    status_code: int = 500
    public_message: str = DEFAULT_UNEXPECTED_MESSAGE

    def __init__(
        self,
        message: str | None = None,
        status_code: int | None = None,
    ) -> None:
        if message is not None:
            self.public_message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.public_message)


class ClientInputError(SubscriptionError):
    """Erro de entrada do cliente (4xx), mensagem exibível ao usuário."""

    status_code = 400


class MethodNotAllowedError(ClientInputError):
    """Método HTTP diferente de POST."""

    status_code = 405
    public_message = "Method not allowed"


class InvalidEmailError(ClientInputError):
    """Email ausente ou sem '@'."""

    public_message = "Valid email is required"


class ConfigurationError(SubscriptionError):
    """Configuração obrigatória ausente (ex: API key)."""

    public_message = "Server configuration error"


class UpstreamError(SubscriptionError):
    """Status não-2xx da API de contatos, repassado ao cliente."""

    public_message = DEFAULT_UPSTREAM_MESSAGE


class UpstreamContractViolation(SubscriptionError):
    """Resposta 2xx fora do contrato (ex: contato sem id)."""

    public_message = "Contact created but ID missing"


class InfrastructureError(SubscriptionError):
    """Base para falhas de infraestrutura transitórias."""


class TransportError(InfrastructureError):
    """Falha de rede, timeout ou parse da resposta upstream."""
