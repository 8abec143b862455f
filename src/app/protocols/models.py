"""Modelos de resultado dos fluxos outbound."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class OutboundSendResult:
    """Resultado do envio da notificação ao WhatsApp."""

    success: bool
    message_id: str | None = None


@dataclass(frozen=True, slots=True)
class MutationResult:
    """Resultado do despacho de uma ação para o Shopify.

    Attributes:
        action: Ação recebida (mesmo se desconhecida)
        order_id: Id recebido no botão
        handled: False quando a ação não pertence a ActionKind
        data: Payload da mutation retornado pelo Shopify
        user_errors: userErrors da mutation, repassados sem filtro
    """

    action: str
    order_id: str
    handled: bool
    data: dict[str, Any] = field(default_factory=dict)
    user_errors: list[dict[str, Any]] = field(default_factory=list)

    @classmethod
    def unhandled(cls, action: str, order_id: str) -> MutationResult:
        return cls(action=action, order_id=order_id, handled=False)
