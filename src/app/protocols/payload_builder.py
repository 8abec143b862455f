"""Protocolos de construção de payload outbound."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.domain.order_event import OrderEvent


class OrderNotificationBuilderProtocol(Protocol):
    """Contrato mínimo para montar o template de notificação de pedido."""

    def build(self, order: OrderEvent, to: str) -> dict[str, Any]: ...
