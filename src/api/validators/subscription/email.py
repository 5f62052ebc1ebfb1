"""Validação do email recebido no formulário de inscrição."""

from __future__ import annotations

from typing import Any

from app.domain.subscription import SubscriptionRequest
from utils.errors import InvalidEmailError


def validate_subscription_payload(payload: Any) -> SubscriptionRequest:
    """Extrai e valida o email do corpo JSON.

    Regra única: o email precisa conter '@'. Nenhuma outra validação de
    formato é aplicada; o upstream rejeita o que não aceitar.

    Args:
        payload: Corpo JSON já decodificado (qualquer tipo)

    Returns:
        SubscriptionRequest com email sem espaços nas bordas

    Raises:
        InvalidEmailError: Corpo não-objeto, email ausente, não-string ou sem '@'
    """
    if not isinstance(payload, dict):
        raise InvalidEmailError()

    email = payload.get("email")
    if not isinstance(email, str):
        raise InvalidEmailError()

    email = email.strip()
    if "@" not in email:
        raise InvalidEmailError()

    return SubscriptionRequest(email=email)
