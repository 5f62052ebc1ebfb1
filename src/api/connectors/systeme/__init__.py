"""Conector Systeme.io — cliente HTTP e parsing de erros."""

from api.connectors.systeme.errors import (
    SystemeApiError,
    extract_error_message,
    is_duplicate_contact_error,
    parse_systeme_error,
)
from api.connectors.systeme.http_client import (
    HttpClientConfig,
    SystemeContactsClient,
    create_systeme_contacts_client,
)

__all__ = [
    "HttpClientConfig",
    "SystemeApiError",
    "SystemeContactsClient",
    "create_systeme_contacts_client",
    "extract_error_message",
    "is_duplicate_contact_error",
    "parse_systeme_error",
]
