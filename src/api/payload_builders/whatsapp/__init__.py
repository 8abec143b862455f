"""Builders de payload para API Meta/WhatsApp."""

from api.payload_builders.whatsapp.template import (
    OrderNotificationPayloadBuilder,
    build_body_parameters,
    build_button_components,
)

__all__ = [
    "OrderNotificationPayloadBuilder",
    "build_body_parameters",
    "build_button_components",
]
