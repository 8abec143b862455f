"""Pedido normalizado recebido do Shopify."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class LineItem:
    """Item do pedido (apenas o necessário para a notificação)."""

    title: str
    quantity: int = 0


@dataclass(frozen=True, slots=True)
class OrderEvent:
    """Pedido normalizado, efêmero, construído a partir de um único webhook.

    Attributes:
        id: Id do Shopify (int ou GID). Ecoado nos botões, nunca reformatado.
        order_number: Identificador de exibição (ex: "#1001")
        customer_name: Nome completo já resolvido ou None
        email: Email do pedido/cliente ou None
        phone: Telefone resolvido pela cadeia de fallback ou None
        address: Componentes não vazios do endereço, separados por ", "
        line_items: Itens na ordem original (pode ser vazio)
        total_price: Total como string decimal, sem recálculo
    """

    id: str | int
    order_number: str
    customer_name: str | None = None
    email: str | None = None
    phone: str | None = None
    address: str = ""
    line_items: tuple[LineItem, ...] = field(default_factory=tuple)
    total_price: str = ""
