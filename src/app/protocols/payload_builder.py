"""Protocolo de construção do payload de criação de contato."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.domain.subscription import SubscriptionRequest


class ContactPayloadBuilderProtocol(Protocol):
    """Contrato para builders do corpo de criação de contato."""

    def build(self, request: SubscriptionRequest) -> dict[str, Any]: ...
