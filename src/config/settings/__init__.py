"""Agregador de settings do serviço de inscrição.

Re-exporta todas as settings e funções de cada módulo.
"""

from __future__ import annotations

from config.settings.base import (
    DEFAULT_SERVICE_NAME,
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.systeme import (
    CONTACTS_PATH,
    DEFAULT_CONTACT_LANGUAGE,
    DEFAULT_SUBSCRIBER_TAG_ID,
    SYSTEME_API_BASE_URL,
    SystemeSettings,
    get_systeme_settings,
    load_systeme_settings,
)

__all__ = [
    # Constants
    "CONTACTS_PATH",
    "DEFAULT_CONTACT_LANGUAGE",
    "DEFAULT_SERVICE_NAME",
    "DEFAULT_SUBSCRIBER_TAG_ID",
    "SYSTEME_API_BASE_URL",
    # Base
    "BaseSettings",
    "Environment",
    # Systeme
    "SystemeSettings",
    "get_base_settings",
    "get_systeme_settings",
    "load_systeme_settings",
]
