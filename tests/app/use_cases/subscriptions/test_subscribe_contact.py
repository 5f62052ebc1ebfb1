"""Testes para SubscribeContactUseCase."""

from __future__ import annotations

import logging
from typing import Any

import pytest

from api.payload_builders import ContactPayloadBuilder
from api.validators import validate_subscription_payload
from app.domain.subscription import ALREADY_SUBSCRIBED_MESSAGE, SUBSCRIBED_MESSAGE
from app.protocols.models import ContactApiResponse
from app.use_cases.subscriptions import SubscribeContactUseCase
from utils.errors import TransportError


class FakeContactsClient:
    """Cliente fake que devolve resposta fixa ou levanta exceção."""

    def __init__(
        self,
        response: ContactApiResponse | None = None,
        error: Exception | None = None,
    ) -> None:
        self._response = response or ContactApiResponse(status_code=201, data={"id": 1})
        self._error = error
        self.calls: list[tuple[str, dict[str, Any]]] = []

    async def create_contact(self, api_key: str, payload: dict[str, Any]) -> ContactApiResponse:
        self.calls.append((api_key, payload))
        if self._error is not None:
            raise self._error
        return self._response


def _use_case(
    client: FakeContactsClient,
    api_key: str | None = "secret",
    invalid_settings: tuple[str, ...] = (),
) -> SubscribeContactUseCase:
    return SubscribeContactUseCase(
        api_key=api_key,
        invalid_settings=invalid_settings,
        validator=validate_subscription_payload,
        builder=ContactPayloadBuilder(language="en", tag_id=42),
        contacts_client=client,
    )


VALID_PAYLOAD = {"email": "reader@example.com"}


class TestSubscribeContactUseCase:
    """Testes do fluxo de inscrição."""

    @pytest.mark.asyncio
    async def test_success_creates_contact_with_tag_in_single_call(self) -> None:
        client = FakeContactsClient(
            ContactApiResponse(status_code=201, data={"id": 99, "tagIds": [42]})
        )

        result = await _use_case(client).execute(VALID_PAYLOAD)

        assert result.status_code == 200
        assert result.as_body() == {"success": True, "message": SUBSCRIBED_MESSAGE}
        assert client.calls == [
            ("secret", {"email": "reader@example.com", "language": "en", "tagIds": [42]})
        ]

    @pytest.mark.asyncio
    async def test_missing_id_is_contract_violation(self) -> None:
        client = FakeContactsClient(ContactApiResponse(status_code=201, data={"email": "x@y"}))

        result = await _use_case(client).execute(VALID_PAYLOAD)

        assert result.status_code == 500
        assert result.as_body() == {"error": "Contact created but ID missing"}

    @pytest.mark.asyncio
    async def test_empty_string_id_is_contract_violation(self) -> None:
        client = FakeContactsClient(ContactApiResponse(status_code=200, data={"id": ""}))

        result = await _use_case(client).execute(VALID_PAYLOAD)

        assert result.status_code == 500

    @pytest.mark.asyncio
    async def test_duplicate_is_idempotent_success(self) -> None:
        client = FakeContactsClient(
            ContactApiResponse(status_code=409, is_duplicate=True, error_message="Conflict")
        )

        result = await _use_case(client).execute(VALID_PAYLOAD)

        assert result.status_code == 200
        assert result.as_body() == {"success": True, "message": ALREADY_SUBSCRIBED_MESSAGE}

    @pytest.mark.asyncio
    async def test_upstream_error_forwards_status_and_message(self) -> None:
        client = FakeContactsClient(
            ContactApiResponse(status_code=401, error_message="Invalid API key")
        )

        result = await _use_case(client).execute(VALID_PAYLOAD)

        assert result.status_code == 401
        assert result.as_body() == {"error": "Invalid API key"}

    @pytest.mark.asyncio
    async def test_upstream_error_without_message_uses_fallback(self) -> None:
        client = FakeContactsClient(ContactApiResponse(status_code=502))

        result = await _use_case(client).execute(VALID_PAYLOAD)

        assert result.status_code == 502
        assert result.as_body() == {"error": "Failed to subscribe. Please try again."}

    @pytest.mark.asyncio
    async def test_transport_error_maps_to_generic_500(self) -> None:
        client = FakeContactsClient(error=TransportError())

        result = await _use_case(client).execute(VALID_PAYLOAD)

        assert result.status_code == 500
        assert result.as_body() == {"error": "An unexpected error occurred. Please try again."}

    @pytest.mark.asyncio
    async def test_unexpected_exception_never_surfaces(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        client = FakeContactsClient(error=RuntimeError("boom: internal detail"))

        with caplog.at_level(logging.ERROR):
            result = await _use_case(client).execute(VALID_PAYLOAD)

        assert result.status_code == 500
        assert result.as_body() == {"error": "An unexpected error occurred. Please try again."}
        assert "boom" not in str(result.as_body())
        assert any(r.getMessage() == "subscription_unexpected_error" for r in caplog.records)

    @pytest.mark.asyncio
    async def test_invalid_email_returns_400_without_upstream_call(self) -> None:
        client = FakeContactsClient()

        result = await _use_case(client).execute({"email": "not-an-email"})

        assert result.status_code == 400
        assert result.as_body() == {"error": "Valid email is required"}
        assert client.calls == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("api_key", [None, "", "   "])
    async def test_missing_api_key_returns_500_before_any_call(
        self,
        api_key: str | None,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        client = FakeContactsClient()

        with caplog.at_level(logging.ERROR):
            result = await _use_case(client, api_key=api_key).execute({"email": "bad"})

        assert result.status_code == 500
        assert result.as_body() == {"error": "Server configuration error"}
        assert client.calls == []
        assert any(r.getMessage() == "systeme_api_key_missing" for r in caplog.records)

    @pytest.mark.asyncio
    async def test_invalid_numeric_settings_return_500_before_any_call(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        client = FakeContactsClient()
        use_case = _use_case(client, invalid_settings=("SYSTEME_SUBSCRIBER_TAG_ID",))

        with caplog.at_level(logging.ERROR):
            result = await use_case.execute(VALID_PAYLOAD)

        assert result.status_code == 500
        assert result.as_body() == {"error": "Server configuration error"}
        assert client.calls == []
        record = next(r for r in caplog.records if r.getMessage() == "systeme_settings_invalid")
        assert record.env_vars == ["SYSTEME_SUBSCRIBER_TAG_ID"]

    @pytest.mark.asyncio
    async def test_contact_with_unreadable_id_is_contract_violation(self) -> None:
        client = FakeContactsClient(
            ContactApiResponse(status_code=201, data={"id": {"value": 5}})
        )

        result = await _use_case(client).execute(VALID_PAYLOAD)

        assert result.status_code == 500
        assert result.as_body() == {"error": "Contact created but ID missing"}
