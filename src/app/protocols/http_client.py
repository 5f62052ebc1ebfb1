"""Protocolos HTTP usados pelo app.

Evita dependência direta da camada api.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.protocols.models import ContactApiResponse


class ContactsClientProtocol(Protocol):
    """Contrato mínimo para o cliente da API de contatos.

    Implementações levantam TransportError para falhas de rede/parse e
    devolvem ContactApiResponse para qualquer status HTTP recebido.
    """

    async def create_contact(
        self,
        api_key: str,
        payload: dict[str, Any],
    ) -> ContactApiResponse: ...
