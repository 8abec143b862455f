"""Casos de uso do relay de pedidos (Shopify ↔ WhatsApp)."""

from .notify_order import OrderNotifier
from .route_action import ActionRouter

__all__ = [
    "ActionRouter",
    "OrderNotifier",
]
