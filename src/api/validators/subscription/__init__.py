"""Validadores do payload de inscrição."""

from api.validators.subscription.email import validate_subscription_payload

__all__ = ["validate_subscription_payload"]
