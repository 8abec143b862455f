"""Builder do template de notificação de pedido.

Ordem dos parâmetros do body (deve casar com os placeholders do template):
    {{1}} número do pedido
    {{2}} nome do cliente
    {{3}} email
    {{4}} telefone
    {{5}} endereço
    {{6}} título do primeiro item
    {{7}} quantidade do primeiro item
    {{8}} total

Depois do body, um botão quick-reply por ActionKind, na ordem do enum,
com payload ``"<ActionKind>|<orderId>"``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from app.constants.actions import ActionKind
from app.domain.action_payload import encode_action_payload

if TYPE_CHECKING:
    from app.domain.order_event import OrderEvent

UNKNOWN_CUSTOMER = "Unknown"
NOT_AVAILABLE = "N/A"
DEFAULT_QUANTITY = "0"


def build_body_parameters(order: OrderEvent) -> list[str]:
    """Valores posicionais do body, na ordem dos placeholders."""
    first_item = order.line_items[0] if order.line_items else None
    return [
        order.order_number,
        order.customer_name or UNKNOWN_CUSTOMER,
        order.email or NOT_AVAILABLE,
        order.phone or NOT_AVAILABLE,
        order.address,
        first_item.title if first_item and first_item.title else NOT_AVAILABLE,
        str(first_item.quantity) if first_item else DEFAULT_QUANTITY,
        order.total_price or NOT_AVAILABLE,
    ]


def build_button_components(order_id: str | int) -> list[dict[str, Any]]:
    """Um componente de botão quick-reply por ação."""
    return [
        {
            "type": "button",
            "sub_type": "quick_reply",
            "index": str(index),
            "parameters": [
                {"type": "payload", "payload": encode_action_payload(action, order_id)}
            ],
        }
        for index, action in enumerate(ActionKind)
    ]


class OrderNotificationPayloadBuilder:
    """Builder do payload completo de template para a Cloud API."""

    def __init__(self, template_name: str, language: str) -> None:
        self._template_name = template_name
        self._language = language

    def build(self, order: OrderEvent, to: str) -> dict[str, Any]:
        """Constrói payload de template para o pedido.

        Args:
            order: Pedido normalizado
            to: Número/grupo de destino

        Returns:
            Payload conforme API Meta (messaging_product, to, type, template)
        """
        components: list[dict[str, Any]] = [
            {
                "type": "body",
                "parameters": [
                    {"type": "text", "text": value}
                    for value in build_body_parameters(order)
                ],
            },
            *build_button_components(order.id),
        ]
        return {
            "messaging_product": "whatsapp",
            "to": to,
            "type": "template",
            "template": {
                "name": self._template_name,
                "language": {"code": self._language},
                "components": components,
            },
        }
