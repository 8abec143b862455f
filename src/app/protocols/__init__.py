"""Protocolos e contratos do core da aplicação."""

from .http_client import ShopifyGraphQLClientProtocol, WhatsAppHttpClientProtocol
from .models import MutationResult, OutboundSendResult
from .payload_builder import OrderNotificationBuilderProtocol

__all__ = [
    "MutationResult",
    "OrderNotificationBuilderProtocol",
    "OutboundSendResult",
    "ShopifyGraphQLClientProtocol",
    "WhatsAppHttpClientProtocol",
]
