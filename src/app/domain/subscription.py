"""Modelos de domínio do fluxo de inscrição na newsletter.

Todos os modelos vivem apenas durante uma requisição: nada é persistido
nem cacheado entre chamadas.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from utils.errors import SubscriptionError

SUBSCRIBED_MESSAGE = "Successfully subscribed!"
ALREADY_SUBSCRIBED_MESSAGE = "You are already subscribed!"


class SubscriptionRequest(BaseModel):
    """Payload aceito pelo endpoint de inscrição."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    email: str = Field(..., description="Email do inscrito (deve conter '@').")


class ExternalContact(BaseModel):
    """Contato criado pela API externa; nunca persistido aqui.

    Só o `id` decide o sucesso. Os demais campos são informativos e aceitam
    qualquer formato devolvido pelo upstream.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: int | str | None = Field(default=None, description="Identificador do contato.")
    email: Any = None
    language: Any = Field(
        default=None,
        validation_alias=AliasChoices("language", "locale"),
    )
    tag_ids: Any = Field(
        default=None,
        validation_alias=AliasChoices("tagIds", "tag_ids"),
    )

    @property
    def has_id(self) -> bool:
        return self.id is not None and self.id != ""


@dataclass(frozen=True, slots=True)
class SubscriptionResult:
    """Resultado devolvido ao cliente: sucesso com mensagem ou erro."""

    status_code: int
    success: bool
    message: str | None = None
    error: str | None = None

    @classmethod
    def subscribed(cls) -> SubscriptionResult:
        return cls(status_code=200, success=True, message=SUBSCRIBED_MESSAGE)

    @classmethod
    def already_subscribed(cls) -> SubscriptionResult:
        """Duplicata no upstream é tratada como sucesso idempotente."""
        return cls(status_code=200, success=True, message=ALREADY_SUBSCRIBED_MESSAGE)

    @classmethod
    def from_error(cls, exc: SubscriptionError) -> SubscriptionResult:
        return cls(status_code=exc.status_code, success=False, error=exc.public_message)

    def as_body(self) -> dict[str, Any]:
        """Corpo JSON: {success, message} ou {error}."""
        if self.success:
            return {"success": True, "message": self.message}
        return {"error": self.error}
