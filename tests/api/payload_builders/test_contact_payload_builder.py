"""Testes do builder de criação de contato."""

from __future__ import annotations

from api.payload_builders import ContactPayloadBuilder
from app.domain.subscription import SubscriptionRequest


def test_build_merges_language_and_tag_into_creation_payload() -> None:
    builder = ContactPayloadBuilder(language="en", tag_id=42)

    payload = builder.build(SubscriptionRequest(email="reader@example.com"))

    assert payload == {"email": "reader@example.com", "language": "en", "tagIds": [42]}
