"""Contratos de dados trocados entre app e conectores."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class ContactApiResponse:
    """Resposta da API de contatos já classificada pelo conector.

    Attributes:
        status_code: Status HTTP retornado pelo upstream
        data: Corpo JSON ({} quando corpo de erro não é JSON)
        is_duplicate: True se o erro indica contato já existente
        error_message: message/detail do corpo de erro, se houver
    """

    status_code: int
    data: dict[str, Any] = field(default_factory=dict)
    is_duplicate: bool = False
    error_message: str | None = None

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300
