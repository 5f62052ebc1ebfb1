"""Testes da validação do payload de inscrição."""

from __future__ import annotations

import pytest

from api.validators import validate_subscription_payload
from utils.errors import InvalidEmailError


@pytest.mark.parametrize(
    "payload",
    [
        None,
        [],
        "reader@example.com",
        {},
        {"email": None},
        {"email": ""},
        {"email": 123},
        {"email": "reader.example.com"},
        {"mail": "reader@example.com"},
    ],
)
def test_invalid_payload_raises_invalid_email(payload: object) -> None:
    with pytest.raises(InvalidEmailError) as exc_info:
        validate_subscription_payload(payload)

    assert exc_info.value.status_code == 400
    assert exc_info.value.public_message == "Valid email is required"


def test_valid_email_is_returned_stripped() -> None:
    request = validate_subscription_payload({"email": "  reader@example.com \n"})

    assert request.email == "reader@example.com"


def test_only_at_sign_is_required() -> None:
    # Nenhuma validação de formato além do '@'
    request = validate_subscription_payload({"email": "a@b"})

    assert request.email == "a@b"


def test_extra_fields_are_ignored() -> None:
    request = validate_subscription_payload({"email": "reader@example.com", "name": "Ana"})

    assert request.email == "reader@example.com"
