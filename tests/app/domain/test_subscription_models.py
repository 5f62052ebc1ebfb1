"""Testes dos modelos de domínio da inscrição."""

from __future__ import annotations

from app.domain.subscription import ExternalContact, SubscriptionResult
from utils.errors import UpstreamError


def test_external_contact_parses_upstream_body() -> None:
    contact = ExternalContact.model_validate(
        {"id": 10, "email": "reader@example.com", "locale": "en", "tagIds": [42], "fields": []}
    )

    assert contact.has_id is True
    assert contact.language == "en"
    assert contact.tag_ids == [42]


def test_external_contact_without_id() -> None:
    assert ExternalContact.model_validate({"email": "reader@example.com"}).has_id is False


def test_result_bodies() -> None:
    assert SubscriptionResult.subscribed().as_body() == {
        "success": True,
        "message": "Successfully subscribed!",
    }
    assert SubscriptionResult.already_subscribed().status_code == 200

    failure = SubscriptionResult.from_error(UpstreamError(message="Nope", status_code=403))
    assert failure.status_code == 403
    assert failure.as_body() == {"error": "Nope"}


def test_external_contact_accepts_unexpected_field_shapes() -> None:
    contact = ExternalContact.model_validate(
        {"id": 5, "tagIds": [{"id": 42}], "locale": {"code": "en"}, "email": None}
    )

    assert contact.has_id is True
    assert contact.tag_ids == [{"id": 42}]
