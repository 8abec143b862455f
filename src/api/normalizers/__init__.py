"""Normalizers: conversão de payloads externos para modelos internos.

Estrutura:
- shopify/: pedido do webhook Shopify → OrderEvent
"""

from .shopify import normalize_order

__all__ = [
    "normalize_order",
]
