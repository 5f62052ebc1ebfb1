"""Endpoints de health check."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from config.settings import SystemeSettings, get_base_settings, get_systeme_settings

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Resultado de checagem de dependência."""

    status: Literal["ok", "failed"]
    error: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {"status": self.status, "error": self.error}


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe — verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service=get_base_settings().service_name,
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check(
    settings: SystemeSettings = Depends(get_systeme_settings),
) -> JSONResponse:
    """Readiness probe: pronto quando a integração Systeme está configurada.

    Não chama a API externa; só confere a configuração local.
    """
    systeme_check = _check_systeme(settings)
    ready = systeme_check.status == "ok"

    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {"systeme": systeme_check.as_dict()},
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)


def _check_systeme(settings: SystemeSettings) -> DependencyCheck:
    if not settings.has_api_key:
        return DependencyCheck(status="failed", error="not_configured")
    errors = settings.validate()
    if errors:
        return DependencyCheck(status="failed", error="invalid_settings")
    return DependencyCheck(status="ok")
