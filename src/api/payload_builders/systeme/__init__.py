"""Builders de payload da API Systeme.io."""

from api.payload_builders.systeme.contact import ContactPayloadBuilder

__all__ = ["ContactPayloadBuilder"]
