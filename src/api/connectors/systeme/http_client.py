"""Cliente HTTP para a API de contatos Systeme.io.

Comportamento:
- Uma única chamada POST por inscrição (sem retry/backoff)
- Header X-API-Key com o secret recebido por chamada
- Qualquer status HTTP vira ContactApiResponse classificada (duplicata, mensagem)
- Falha de rede, timeout ou corpo 2xx não-JSON vira TransportError
- Logging estruturado sem API key e sem email
"""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import httpx

from api.connectors.systeme.errors import parse_systeme_error
from app.observability import record_latency
from app.protocols.models import ContactApiResponse
from utils.errors import TransportError

if TYPE_CHECKING:
    from config.settings import SystemeSettings

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    endpoint: str
    timeout_seconds: float = 10.0
    default_headers: dict[str, str] = field(
        default_factory=lambda: {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
    )
    verify_ssl: bool = True


class SystemeContactsClient:
    """Cliente da API de contatos.

    Args:
        config: Endpoint, timeout e headers padrão
        http_client: AsyncClient compartilhado; se None, abre um por chamada
    """

    def __init__(
        self,
        config: HttpClientConfig,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config
        self._http_client = http_client

    async def create_contact(
        self,
        api_key: str,
        payload: dict[str, Any],
    ) -> ContactApiResponse:
        """Cria contato (com tags) via POST /api/contacts.

        Args:
            api_key: Secret para o header X-API-Key
            payload: Corpo JSON {email, language, tagIds}

        Returns:
            ContactApiResponse com status e corpo do upstream

        Raises:
            ValueError: Se api_key está vazia
            TransportError: Falha de rede, timeout ou corpo 2xx inválido
        """
        if not api_key or not api_key.strip():
            raise ValueError("api_key é obrigatória para criar contatos")

        headers = {**self._config.default_headers, "X-API-Key": api_key}
        started_at = time.perf_counter()
        try:
            response = await self._post(payload, headers)
        except httpx.HTTPError as exc:
            logger.warning(
                "systeme_request_failed",
                extra={"endpoint": self._config.endpoint, "error_type": type(exc).__name__},
            )
            raise TransportError() from exc
        finally:
            record_latency(
                "systeme",
                "create_contact",
                (time.perf_counter() - started_at) * 1000,
            )

        return self._process_response(response)

    async def _post(
        self,
        payload: dict[str, Any],
        headers: dict[str, str],
    ) -> httpx.Response:
        if self._http_client is not None:
            return await self._http_client.post(
                self._config.endpoint,
                json=payload,
                headers=headers,
                timeout=self._config.timeout_seconds,
            )
        async with httpx.AsyncClient(verify=self._config.verify_ssl) as client:
            return await client.post(
                self._config.endpoint,
                json=payload,
                headers=headers,
                timeout=self._config.timeout_seconds,
            )

    def _process_response(self, response: httpx.Response) -> ContactApiResponse:
        """Decodifica o corpo; só respostas 2xx exigem JSON válido."""
        is_success = response.is_success
        try:
            data = response.json() if response.content else {}
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            if is_success:
                logger.error(
                    "systeme_invalid_json",
                    extra={"endpoint": self._config.endpoint, "status_code": response.status_code},
                )
                raise TransportError() from exc
            data = {}

        if not isinstance(data, dict):
            if is_success:
                logger.error(
                    "systeme_unexpected_body",
                    extra={"endpoint": self._config.endpoint, "status_code": response.status_code},
                )
                raise TransportError()
            data = {}

        logger.info(
            "systeme_response_received",
            extra={"endpoint": self._config.endpoint, "status_code": response.status_code},
        )
        if is_success:
            return ContactApiResponse(status_code=response.status_code, data=data)

        api_error = parse_systeme_error(response.status_code, data)
        return ContactApiResponse(
            status_code=response.status_code,
            data=data,
            is_duplicate=api_error.is_duplicate,
            error_message=api_error.message,
        )


def create_systeme_contacts_client(
    settings: SystemeSettings,
    http_client: httpx.AsyncClient | None = None,
) -> SystemeContactsClient:
    """Factory do cliente com config derivada das settings.

    Args:
        settings: SystemeSettings da requisição atual
        http_client: AsyncClient opcional (testes injetam MockTransport)

    Returns:
        Cliente configurado para a API de contatos.
    """
    config = HttpClientConfig(
        endpoint=settings.contacts_endpoint,
        timeout_seconds=settings.request_timeout_seconds,
    )
    return SystemeContactsClient(config=config, http_client=http_client)
