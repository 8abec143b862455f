"""Factories dos componentes do relay.

Recebem settings já carregadas; nada aqui lê o ambiente. O resultado
fica em ``app.state.relay`` e é o único estado consultado pelas rotas.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from api.connectors.shopify import MUTATIONS, create_shopify_graphql_client
from api.connectors.whatsapp import create_whatsapp_http_client
from api.payload_builders.whatsapp import OrderNotificationPayloadBuilder
from app.use_cases.orders import ActionRouter, OrderNotifier

if TYPE_CHECKING:
    from config.settings import ShopifySettings, WhatsAppSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RelayComponents:
    """Componentes imutáveis montados no startup.

    Attributes:
        shopify_secret: Secret HMAC dos webhooks de pedido
        verify_token: Token esperado no handshake hub.verify_token
        notifier: OrderNotifier ou None se WhatsApp não configurado
        action_router: ActionRouter ou None se Shopify não configurado
    """

    shopify_secret: str
    verify_token: str
    notifier: OrderNotifier | None = None
    action_router: ActionRouter | None = None


def create_order_notifier(settings: WhatsAppSettings) -> OrderNotifier:
    """Cria o OrderNotifier com cliente e builder do WhatsApp.

    Raises:
        ValueError: Se phone_number_id não estiver configurado
    """
    return OrderNotifier(
        client=create_whatsapp_http_client(settings),
        builder=OrderNotificationPayloadBuilder(
            template_name=settings.template_name,
            language=settings.template_language,
        ),
        endpoint=settings.get_messages_endpoint(),
        access_token=settings.access_token,
        recipient=settings.recipient_number,
    )


def create_action_router(settings: ShopifySettings) -> ActionRouter:
    """Cria o ActionRouter com cliente GraphQL e catálogo de mutations.

    Raises:
        ValueError: Se store_domain não estiver configurado
    """
    return ActionRouter(
        client=create_shopify_graphql_client(settings),
        mutations=MUTATIONS,
    )


def create_relay_components(
    whatsapp: WhatsAppSettings,
    shopify: ShopifySettings,
) -> RelayComponents:
    """Monta os componentes; integrações sem config mínima ficam None."""
    notifier: OrderNotifier | None = None
    action_router: ActionRouter | None = None

    try:
        notifier = create_order_notifier(whatsapp)
    except ValueError as exc:
        logger.warning("order_notifier_not_ready", extra={"error": str(exc)})

    try:
        action_router = create_action_router(shopify)
    except ValueError as exc:
        logger.warning("action_router_not_ready", extra={"error": str(exc)})

    return RelayComponents(
        shopify_secret=shopify.app_secret,
        verify_token=whatsapp.verify_token,
        notifier=notifier,
        action_router=action_router,
    )
