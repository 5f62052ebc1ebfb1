"""Use case de inscrição na newsletter.

Fluxo linear, uma única chamada upstream:
1. API key e settings numéricas válidas? (senão 500, diagnóstico só no log)
2. Email válido? (senão 400)
3. Cria contato com idioma e tag na mesma chamada
4. Interpreta o resultado: sucesso, duplicata (= sucesso) ou erro
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from app.domain.subscription import (
    ALREADY_SUBSCRIBED_MESSAGE,
    ExternalContact,
    SubscriptionResult,
)
from app.observability import record_subscription_outcome
from config.logging import log_upstream_failure
from utils.errors import (
    ClientInputError,
    ConfigurationError,
    SubscriptionError,
    TransportError,
    UpstreamContractViolation,
    UpstreamError,
)

if TYPE_CHECKING:
    from app.protocols import (
        ContactApiResponse,
        ContactPayloadBuilderProtocol,
        ContactsClientProtocol,
        SubscriptionValidatorProtocol,
    )

logger = logging.getLogger(__name__)


class SubscribeContactUseCase:
    """Orquestra validação, criação do contato e mapeamento do resultado.

    Nunca levanta exceção: todo desfecho vira SubscriptionResult.
    """

    def __init__(
        self,
        api_key: str | None,
        validator: SubscriptionValidatorProtocol,
        builder: ContactPayloadBuilderProtocol,
        contacts_client: ContactsClientProtocol,
        invalid_settings: tuple[str, ...] = (),
    ) -> None:
        self._api_key = api_key
        self._invalid_settings = invalid_settings
        self._validator = validator
        self._builder = builder
        self._contacts_client = contacts_client

    async def execute(self, payload: Any) -> SubscriptionResult:
        """Executa a inscrição para o corpo JSON recebido."""
        try:
            result = await self._subscribe(payload)
        except ClientInputError as exc:
            logger.info(
                "subscription_rejected",
                extra={"reason": type(exc).__name__, "status_code": exc.status_code},
            )
            result = SubscriptionResult.from_error(exc)
        except SubscriptionError as exc:
            result = SubscriptionResult.from_error(exc)
        except Exception:
            logger.exception("subscription_unexpected_error")
            result = SubscriptionResult.from_error(TransportError())

        record_subscription_outcome(_outcome_label(result), result.status_code)
        return result

    async def _subscribe(self, payload: Any) -> SubscriptionResult:
        if not self._api_key or not self._api_key.strip():
            logger.error(
                "systeme_api_key_missing",
                extra={"component": "subscribe_contact", "env_var": "SYSTEME_API_KEY"},
            )
            raise ConfigurationError()

        if self._invalid_settings:
            logger.error(
                "systeme_settings_invalid",
                extra={
                    "component": "subscribe_contact",
                    "env_vars": list(self._invalid_settings),
                },
            )
            raise ConfigurationError()

        request = self._validator(payload)
        contact_payload = self._builder.build(request)
        response = await self._contacts_client.create_contact(self._api_key, contact_payload)
        return self._interpret(response)

    def _interpret(self, response: ContactApiResponse) -> SubscriptionResult:
        """Mapeia a resposta upstream para o resultado do cliente.

        Raises:
            UpstreamContractViolation: 2xx sem id do contato (ou id ilegível)
            UpstreamError: Status não-2xx que não é duplicata
        """
        if response.is_success:
            try:
                contact = ExternalContact.model_validate(response.data)
            except ValidationError:
                contact = None
            if contact is None or not contact.has_id:
                logger.error(
                    "systeme_contact_id_missing",
                    extra={"status_code": response.status_code},
                )
                raise UpstreamContractViolation()
            logger.info(
                "contact_created",
                extra={"contact_id": contact.id, "tag_ids": contact.tag_ids},
            )
            return SubscriptionResult.subscribed()

        if response.is_duplicate:
            logger.info(
                "contact_already_exists",
                extra={"status_code": response.status_code},
            )
            return SubscriptionResult.already_subscribed()

        log_upstream_failure(
            logger,
            "create_contact",
            status_code=response.status_code,
            reason=response.error_message,
        )
        raise UpstreamError(
            message=response.error_message,
            status_code=response.status_code,
        )


def _outcome_label(result: SubscriptionResult) -> str:
    if result.success:
        if result.message == ALREADY_SUBSCRIBED_MESSAGE:
            return "already_subscribed"
        return "subscribed"
    return "rejected" if result.status_code < 500 else "failed"
