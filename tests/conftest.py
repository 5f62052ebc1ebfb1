"""Configuração do pytest para o serviço de inscrição."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from config.settings import SystemeSettings  # noqa: E402


@pytest.fixture
def systeme_settings() -> SystemeSettings:
    """Settings com API key e tag fixas para testes."""
    return SystemeSettings(
        api_key="test-api-key",
        api_base_url="https://systeme.test",
        contact_language="en",
        subscriber_tag_id=42,
        request_timeout_seconds=5.0,
    )
