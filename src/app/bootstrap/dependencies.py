"""Dependências FastAPI do endpoint de inscrição.

Cada requisição relê as settings e monta um use case novo. Testes
substituem `get_systeme_settings` e `get_contacts_client` via
`app.dependency_overrides`.
"""

from __future__ import annotations

from fastapi import Depends, Request

from api.payload_builders import ContactPayloadBuilder
from api.validators import validate_subscription_payload
from app.bootstrap.clients import create_contacts_client
from app.protocols import ContactsClientProtocol  # noqa: TC001 - resolvido pelo FastAPI
from app.use_cases.subscriptions import SubscribeContactUseCase
from config.settings import SystemeSettings, get_systeme_settings


def get_contacts_client(
    request: Request,
    settings: SystemeSettings = Depends(get_systeme_settings),
) -> ContactsClientProtocol:
    """Cliente de contatos usando o AsyncClient do lifespan, se existir."""
    shared = getattr(request.app.state, "http_client", None)
    return create_contacts_client(settings, http_client=shared)


def create_subscribe_contact_use_case(
    settings: SystemeSettings,
    contacts_client: ContactsClientProtocol,
) -> SubscribeContactUseCase:
    """Conecta validator, builder e cliente ao use case."""
    return SubscribeContactUseCase(
        api_key=settings.api_key,
        validator=validate_subscription_payload,
        builder=ContactPayloadBuilder(
            language=settings.contact_language,
            tag_id=settings.subscriber_tag_id,
        ),
        contacts_client=contacts_client,
        invalid_settings=settings.invalid_env_vars,
    )


def get_subscribe_use_case(
    settings: SystemeSettings = Depends(get_systeme_settings),
    contacts_client: ContactsClientProtocol = Depends(get_contacts_client),
) -> SubscribeContactUseCase:
    return create_subscribe_contact_use_case(settings, contacts_client)
