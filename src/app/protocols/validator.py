"""Protocolo de validação do payload de inscrição."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.domain.subscription import SubscriptionRequest


class SubscriptionValidatorProtocol(Protocol):
    """Valida o corpo bruto e devolve SubscriptionRequest.

    Raises:
        InvalidEmailError: Se o email for inválido
    """

    def __call__(self, payload: Any) -> SubscriptionRequest: ...
