"""Normalização do payload de pedido do Shopify para OrderEvent.

Regras:
- ``id`` é obrigatório e carregado sem conversão (int ou GID)
- telefone: phone do pedido/cliente → shipping_address → billing_address
- endereço: componentes não vazios do shipping_address (ou billing_address),
  separados por ", "; componentes ausentes são omitidos
"""

from __future__ import annotations

from typing import Any

from api.connectors.shopify.webhook import InvalidOrderError
from app.domain.order_event import LineItem, OrderEvent

ADDRESS_FIELDS = ("address1", "address2", "city", "province", "country", "zip")


def _as_dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _clean(value: Any) -> str | None:
    """Converte para string sem espaços nas bordas; vazio vira None."""
    if value is None or isinstance(value, (dict, list)):
        return None
    text = str(value).strip()
    return text or None


def _first_present(*values: Any) -> str | None:
    for value in values:
        cleaned = _clean(value)
        if cleaned:
            return cleaned
    return None


def resolve_customer_name(customer: dict[str, Any]) -> str | None:
    parts = [_clean(customer.get("first_name")), _clean(customer.get("last_name"))]
    name = " ".join(part for part in parts if part)
    return name or None


def resolve_phone(order: dict[str, Any]) -> str | None:
    customer = _as_dict(order.get("customer"))
    return _first_present(
        order.get("phone"),
        customer.get("phone"),
        _as_dict(order.get("shipping_address")).get("phone"),
        _as_dict(order.get("billing_address")).get("phone"),
    )


def format_address(order: dict[str, Any]) -> str:
    address = _as_dict(order.get("shipping_address")) or _as_dict(
        order.get("billing_address")
    )
    components = (_clean(address.get(name)) for name in ADDRESS_FIELDS)
    return ", ".join(component for component in components if component)


def _parse_quantity(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def extract_line_items(order: dict[str, Any]) -> tuple[LineItem, ...]:
    raw_items = order.get("line_items")
    if not isinstance(raw_items, list):
        return ()
    return tuple(
        LineItem(
            title=_clean(item.get("title")) or "",
            quantity=_parse_quantity(item.get("quantity")),
        )
        for item in raw_items
        if isinstance(item, dict)
    )


def normalize_order(payload: dict[str, Any]) -> OrderEvent:
    """Converte o JSON do webhook de pedido em OrderEvent.

    Args:
        payload: Corpo do webhook já autenticado e parseado

    Raises:
        InvalidOrderError: Se ``id`` estiver ausente ou vazio

    Returns:
        OrderEvent imutável
    """
    order_id = payload.get("id")
    if order_id is None or isinstance(order_id, bool) or order_id == "":
        raise InvalidOrderError("missing_order_id")
    if not isinstance(order_id, (str, int)):
        raise InvalidOrderError("invalid_order_id")

    customer = _as_dict(payload.get("customer"))
    return OrderEvent(
        id=order_id,
        order_number=_first_present(payload.get("name"), payload.get("order_number"))
        or str(order_id),
        customer_name=resolve_customer_name(customer),
        email=_first_present(
            payload.get("email"),
            payload.get("contact_email"),
            customer.get("email"),
        ),
        phone=resolve_phone(payload),
        address=format_address(payload),
        line_items=extract_line_items(payload),
        total_price=_first_present(
            payload.get("current_total_price"),
            payload.get("total_price"),
        )
        or "",
    )
