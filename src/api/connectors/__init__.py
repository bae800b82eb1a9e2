"""Connectors — adapters de borda para plataformas externas.

Estrutura:
- hub/: webhooks com X-Hub-Signature (sha1) e handshake hub.challenge
"""

__all__: list[str] = []
