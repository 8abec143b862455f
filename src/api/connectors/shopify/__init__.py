"""Conector Shopify - adapter de borda para webhooks e Admin GraphQL API.

Responsabilidades:
- Verificação HMAC dos webhooks de pedido
- Parse seguro do corpo (só após assinatura válida)
- Cliente GraphQL e catálogo de mutations de fulfillment
"""

from .graphql_client import ShopifyGraphQLClient, create_shopify_graphql_client
from .mutations import MUTATIONS, MutationSpec
from .signature import (
    VerificationResult,
    compute_shopify_hmac,
    verify_shopify_hmac,
    verify_shopify_signature,
)
from .webhook import (
    InvalidJsonError,
    InvalidOrderError,
    InvalidSignatureError,
    WebhookRequestError,
    get_topic,
    parse_json_object,
    parse_order_webhook,
)

__all__ = [
    "MUTATIONS",
    "InvalidJsonError",
    "InvalidOrderError",
    "InvalidSignatureError",
    "MutationSpec",
    "ShopifyGraphQLClient",
    "VerificationResult",
    "WebhookRequestError",
    "compute_shopify_hmac",
    "create_shopify_graphql_client",
    "get_topic",
    "parse_json_object",
    "parse_order_webhook",
    "verify_shopify_hmac",
    "verify_shopify_signature",
]
