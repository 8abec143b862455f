"""Connectors por plataforma: adapters de borda para APIs externas.

Estrutura:
- shopify/: webhooks de pedido (HMAC) e Admin GraphQL API
- whatsapp/: Cloud API (envio de template, handshake, respostas a botões)
"""

__all__: list[str] = []
