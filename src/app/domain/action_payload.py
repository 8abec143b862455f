"""Codificação (ação, pedido) no id de botão do WhatsApp.

O id de botão interativo é uma única string opaca, então o par é
serializado como ``"<ActionKind>|<orderId>"``. Toda leitura e escrita
desse formato passa por este módulo.
"""

from __future__ import annotations

from dataclasses import dataclass

from app.constants.actions import ActionKind

ACTION_PAYLOAD_SEPARATOR = "|"


class InvalidActionPayloadError(ValueError):
    """Id de botão sem separador ou com partes vazias."""


@dataclass(frozen=True, slots=True)
class ActionPayload:
    """Par (ação, pedido) carregado por um botão.

    Attributes:
        action: Nome da ação. Mantido como string porque vem de payload
            externo e pode não pertencer a ActionKind.
        order_id: Id do pedido/fulfillment order, sem reformatação.
    """

    action: str
    order_id: str


def encode_action_payload(action: ActionKind | str, order_id: str | int) -> str:
    """Serializa (ação, pedido) para o id de botão.

    Raises:
        InvalidActionPayloadError: Se order_id estiver vazio ou contiver o separador
    """
    order_ref = str(order_id)
    if not order_ref:
        raise InvalidActionPayloadError("empty_order_id")
    if ACTION_PAYLOAD_SEPARATOR in order_ref:
        raise InvalidActionPayloadError("separator_in_order_id")
    return f"{action}{ACTION_PAYLOAD_SEPARATOR}{order_ref}"


def decode_action_payload(raw: str) -> ActionPayload:
    """Desserializa id de botão em ActionPayload.

    Divide apenas no primeiro separador: tudo que vem depois é o id
    completo do pedido.

    Raises:
        InvalidActionPayloadError: Se o separador faltar ou alguma parte for vazia
    """
    action, sep, order_id = raw.partition(ACTION_PAYLOAD_SEPARATOR)
    if not sep:
        raise InvalidActionPayloadError("missing_separator")
    if not action or not order_id:
        raise InvalidActionPayloadError("empty_component")
    return ActionPayload(action=action, order_id=order_id)
