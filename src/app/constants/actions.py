"""Ações de ciclo de vida disparáveis a partir do WhatsApp."""

from __future__ import annotations

from enum import StrEnum


class ActionKind(StrEnum):
    """Mutations de fulfillment expostas como botões na notificação.

    A ordem de declaração é a ordem dos botões no template.
    """

    FULFILL_ORDER = "FULFILL_ORDER"
    CANCEL_FULFILLMENT = "CANCEL_FULFILLMENT"
    CANCEL_ORDER = "CANCEL_ORDER"
    READY_FOR_PICKUP = "READY_FOR_PICKUP"
