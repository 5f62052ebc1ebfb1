"""Testes dos endpoints de health e readiness."""

from __future__ import annotations

import json

import pytest

from api.routes.health.router import health_check, readiness_check
from config.settings import SystemeSettings


@pytest.mark.asyncio
async def test_health_returns_healthy() -> None:
    response = await health_check()

    assert response.status == "healthy"
    assert response.service


@pytest.mark.asyncio
async def test_readiness_returns_not_ready_without_api_key() -> None:
    response = await readiness_check(SystemeSettings(api_key=""))
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 503
    assert payload["status"] == "not_ready"
    assert payload["checks"]["systeme"] == {"status": "failed", "error": "not_configured"}


@pytest.mark.asyncio
async def test_readiness_returns_not_ready_with_invalid_settings() -> None:
    response = await readiness_check(SystemeSettings(api_key="k", request_timeout_seconds=0))
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 503
    assert payload["checks"]["systeme"]["error"] == "invalid_settings"


@pytest.mark.asyncio
async def test_readiness_returns_ready_when_configured(
    systeme_settings: SystemeSettings,
) -> None:
    response = await readiness_check(systeme_settings)
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 200
    assert payload["status"] == "ready"
    assert payload["checks"]["systeme"]["status"] == "ok"
