"""Webhook WhatsApp: handshake de assinatura e respostas a botões."""

from .interactive import extract_button_reply_id
from .verify import (
    HUB_QUERY_PARAMS,
    WebhookChallengeError,
    is_challenge_request,
    verify_webhook_challenge,
)

__all__ = [
    "HUB_QUERY_PARAMS",
    "WebhookChallengeError",
    "extract_button_reply_id",
    "is_challenge_request",
    "verify_webhook_challenge",
]
