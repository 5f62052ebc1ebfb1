"""Validators — validação de payloads de entrada.

Estrutura:
- subscription/: formulário de inscrição na newsletter
"""

from api.validators.subscription import validate_subscription_payload

__all__ = ["validate_subscription_payload"]
