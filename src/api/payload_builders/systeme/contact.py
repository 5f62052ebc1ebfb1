"""Builder do payload de criação de contato com tag."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.domain.subscription import SubscriptionRequest


class ContactPayloadBuilder:
    """Monta o corpo de POST /api/contacts.

    Criação e tag vão na mesma chamada: o contato nunca existe sem a tag.
    """

    def __init__(self, language: str, tag_id: int) -> None:
        self._language = language
        self._tag_id = tag_id

    def build(self, request: SubscriptionRequest) -> dict[str, Any]:
        """Constrói payload de criação.

        Args:
            request: Inscrição já validada

        Returns:
            {"email", "language", "tagIds"} conforme API Systeme.io
        """
        return {
            "email": request.email,
            "language": self._language,
            "tagIds": [self._tag_id],
        }
