"""Payload builders: construção de payloads para APIs externas.

Estrutura:
- whatsapp/: template de notificação de pedido (Cloud API)
"""

__all__: list[str] = []
