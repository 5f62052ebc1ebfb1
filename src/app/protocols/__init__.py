"""Protocolos e contratos do core da aplicação."""

from .http_client import ContactsClientProtocol
from .models import ContactApiResponse
from .payload_builder import ContactPayloadBuilderProtocol
from .validator import SubscriptionValidatorProtocol

__all__ = [
    "ContactApiResponse",
    "ContactPayloadBuilderProtocol",
    "ContactsClientProtocol",
    "SubscriptionValidatorProtocol",
]
