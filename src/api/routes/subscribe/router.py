"""Endpoint de inscrição na newsletter.

Endpoints:
- POST /api/subscribe: cria o contato com tag na API Systeme.io
- Demais métodos: 405 {"error": "Method not allowed"}; métodos fora da lista
  explícita caem no handler global de 405

Respostas:
- 200 {"success": true, "message": ...} (inclusive contato já existente)
- 400 {"error": ...} email inválido
- 500 {"error": ...} configuração ausente ou falha inesperada
- status do upstream {"error": ...} para demais erros da API externa
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.bootstrap.dependencies import get_subscribe_use_case
from app.use_cases.subscriptions import SubscribeContactUseCase
from utils.errors import MethodNotAllowedError

logger = logging.getLogger(__name__)

router = APIRouter()

ALLOWED_METHODS = ("POST",)
REJECTED_METHODS = ["GET", "HEAD", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE", "CONNECT"]


class SubscribeSuccessResponse(BaseModel):
    """Inscrição concluída (ou já existente)."""

    success: bool = True
    message: str


class ErrorResponse(BaseModel):
    """Erro exibível ao cliente."""

    error: str


async def _read_json_body(request: Request) -> Any:
    """Decodifica o corpo JSON; corpo vazio ou inválido vira None."""
    try:
        return await request.json()
    except ValueError:
        return None


@router.post(
    "",
    response_model=None,
    responses={
        200: {"model": SubscribeSuccessResponse},
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def subscribe(
    request: Request,
    use_case: SubscribeContactUseCase = Depends(get_subscribe_use_case),
) -> JSONResponse:
    """Inscreve o email recebido como contato com tag na API externa.

    Body esperado: {"email": "user@example.com"}
    """
    payload = await _read_json_body(request)
    result = await use_case.execute(payload)
    return JSONResponse(content=result.as_body(), status_code=result.status_code)


@router.api_route("", methods=REJECTED_METHODS, include_in_schema=False)
async def method_not_allowed(request: Request) -> JSONResponse:
    """Qualquer método diferente de POST."""
    exc = MethodNotAllowedError()
    logger.info("subscribe_method_not_allowed", extra={"method": request.method})
    return JSONResponse(
        content={"error": exc.public_message},
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        headers={"Allow": ", ".join(ALLOWED_METHODS)},
    )


async def method_not_allowed_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> Response:
    """405 gerado pelo roteador (ex.: PROPFIND) com o mesmo corpo {"error"}.

    Demais HTTPException seguem o handler padrão do FastAPI.
    """
    if exc.status_code != status.HTTP_405_METHOD_NOT_ALLOWED:
        return await http_exception_handler(request, exc)
    logger.info("subscribe_method_not_allowed", extra={"method": request.method})
    return JSONResponse(
        content={"error": MethodNotAllowedError().public_message},
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        headers=exc.headers or {"Allow": ", ".join(ALLOWED_METHODS)},
    )
