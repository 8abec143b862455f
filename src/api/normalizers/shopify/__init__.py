"""Normalizer de pedidos Shopify."""

from .order import format_address, normalize_order, resolve_customer_name, resolve_phone

__all__ = [
    "format_address",
    "normalize_order",
    "resolve_customer_name",
    "resolve_phone",
]
