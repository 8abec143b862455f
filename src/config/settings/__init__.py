"""Agregador de settings do relay de pedidos.

Re-exporta todas as settings e funções de cada módulo.
Organização por integração para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Integrações
from config.settings.shopify import (
    ADMIN_API_VERSION,
    ShopifySettings,
    get_shopify_settings,
)
from config.settings.whatsapp import (
    GRAPH_API_BASE_URL,
    GRAPH_API_VERSION,
    WhatsAppSettings,
    get_whatsapp_settings,
)

__all__ = [
    # Constants
    "ADMIN_API_VERSION",
    "GRAPH_API_BASE_URL",
    "GRAPH_API_VERSION",
    # Base
    "BaseSettings",
    "Environment",
    # Integrações
    "ShopifySettings",
    "WhatsAppSettings",
    "get_base_settings",
    "get_shopify_settings",
    "get_whatsapp_settings",
]
