"""Testes da codificação (ação, pedido) no id de botão."""

from __future__ import annotations

import pytest

from app.constants.actions import ActionKind
from app.domain.action_payload import (
    ActionPayload,
    InvalidActionPayloadError,
    decode_action_payload,
    encode_action_payload,
)


def test_round_trip_numeric_id() -> None:
    encoded = encode_action_payload(ActionKind.FULFILL_ORDER, "820982911946154500")

    decoded = decode_action_payload(encoded)

    assert encoded == "FULFILL_ORDER|820982911946154500"
    assert (decoded.action, decoded.order_id) == ("FULFILL_ORDER", "820982911946154500")


def test_integer_id_is_not_reformatted() -> None:
    assert encode_action_payload(ActionKind.CANCEL_ORDER, 820982911946154508) == (
        "CANCEL_ORDER|820982911946154508"
    )


def test_gid_id_round_trip() -> None:
    encoded = encode_action_payload(ActionKind.CANCEL_ORDER, "gid://shopify/Order/99")

    assert decode_action_payload(encoded) == ActionPayload(
        "CANCEL_ORDER", "gid://shopify/Order/99"
    )


def test_decode_keeps_everything_after_first_separator() -> None:
    decoded = decode_action_payload("READY_FOR_PICKUP|abc|def")

    assert decoded.action == "READY_FOR_PICKUP"
    assert decoded.order_id == "abc|def"


def test_unknown_action_still_decodes() -> None:
    decoded = decode_action_payload("BOGUS_ACTION|123")

    assert decoded.action == "BOGUS_ACTION"


@pytest.mark.parametrize("raw", ["FULFILL_ORDER", "", "|123", "FULFILL_ORDER|"])
def test_decode_rejects_malformed(raw: str) -> None:
    with pytest.raises(InvalidActionPayloadError):
        decode_action_payload(raw)


@pytest.mark.parametrize("order_id", ["", "12|34"])
def test_encode_rejects_invalid_order_id(order_id: str) -> None:
    with pytest.raises(InvalidActionPayloadError):
        encode_action_payload(ActionKind.FULFILL_ORDER, order_id)
