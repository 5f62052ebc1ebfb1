"""Payload builders — construção de payloads para APIs externas.

Estrutura:
- systeme/: API de contatos Systeme.io
"""

from api.payload_builders.systeme import ContactPayloadBuilder

__all__ = ["ContactPayloadBuilder"]
