"""Testes de correlation_id e métricas via log."""

from __future__ import annotations

import logging

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.observability import (
    CorrelationIdMiddleware,
    get_correlation_id,
    record_latency,
    record_subscription_outcome,
    reset_correlation_id,
    set_correlation_id,
)


def test_set_and_reset_correlation_id() -> None:
    token = set_correlation_id("corr-1")
    try:
        assert get_correlation_id() == "corr-1"
    finally:
        reset_correlation_id(token)
    assert get_correlation_id() == ""


def test_set_correlation_id_generates_uuid_when_missing() -> None:
    token = set_correlation_id(None)
    try:
        assert len(get_correlation_id()) == 36
    finally:
        reset_correlation_id(token)


def _app_echoing_correlation_id() -> FastAPI:
    application = FastAPI()
    application.add_middleware(CorrelationIdMiddleware)

    @application.get("/echo")
    async def echo() -> dict[str, str]:
        return {"correlation_id": get_correlation_id()}

    return application


def test_middleware_propagates_inbound_header() -> None:
    client = TestClient(_app_echoing_correlation_id())

    response = client.get("/echo", headers={"X-Correlation-Id": "abc"})

    assert response.json() == {"correlation_id": "abc"}
    assert response.headers["x-correlation-id"] == "abc"


def test_middleware_generates_id_when_absent() -> None:
    client = TestClient(_app_echoing_correlation_id())

    response = client.get("/echo")

    generated = response.json()["correlation_id"]
    assert generated
    assert response.headers["x-correlation-id"] == generated


def test_metrics_are_structured_logs(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="app.observability.metrics"):
        record_latency("systeme", "create_contact", 12.3456)
        record_subscription_outcome("already_subscribed", 200)

    latency, outcome = caplog.records[-2:]
    assert latency.getMessage() == "metric_latency"
    assert latency.latency_ms == 12.35
    assert outcome.getMessage() == "metric_subscription_outcome"
    assert outcome.outcome == "already_subscribed"
    assert outcome.status_code == 200
