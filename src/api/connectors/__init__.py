"""Connectors — adapters de borda para APIs externas.

Estrutura:
- systeme/: API de contatos Systeme.io
"""

__all__: list[str] = []
