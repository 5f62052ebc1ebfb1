"""Factory do cliente da API de contatos."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.systeme import create_systeme_contacts_client

if TYPE_CHECKING:
    import httpx

    from api.connectors.systeme import SystemeContactsClient
    from config.settings import SystemeSettings

logger = logging.getLogger(__name__)


def create_contacts_client(
    settings: SystemeSettings,
    http_client: httpx.AsyncClient | None = None,
) -> SystemeContactsClient:
    """Cria cliente Systeme para a requisição atual.

    Args:
        settings: Settings relidas do ambiente nesta requisição
        http_client: AsyncClient compartilhado (app.state), se houver

    Returns:
        Cliente de contatos configurado
    """
    logger.debug(
        "contacts_client_created",
        extra={"endpoint": settings.contacts_endpoint, "shared_http_client": http_client is not None},
    )
    return create_systeme_contacts_client(settings, http_client=http_client)
