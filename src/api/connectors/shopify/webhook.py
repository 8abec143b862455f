"""Parse e validação inicial do webhook de pedidos (sem PII)."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from .signature import VerificationResult, verify_shopify_signature

if TYPE_CHECKING:
    from collections.abc import Mapping

SHOPIFY_TOPIC_HEADER = "x-shopify-topic"


class WebhookRequestError(ValueError):
    """Erro base para falhas de webhook."""


class InvalidSignatureError(WebhookRequestError):
    """Assinatura inválida ou ausente."""


class InvalidJsonError(WebhookRequestError):
    """JSON inválido no payload do webhook."""


class InvalidOrderError(InvalidJsonError):
    """JSON válido, mas sem os campos mínimos de um pedido."""


def parse_json_object(raw_body: bytes) -> dict[str, Any]:
    """Parseia corpo JSON exigindo um objeto no topo.

    Raises:
        InvalidJsonError: Se o JSON estiver inválido ou não for objeto
    """
    try:
        payload = json.loads(raw_body)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidJsonError("invalid_json") from exc

    if not isinstance(payload, dict):
        raise InvalidJsonError("payload_not_object")
    return payload


def parse_order_webhook(
    raw_body: bytes,
    headers: Mapping[str, str],
    secret: bytes | str | None,
) -> tuple[dict[str, Any], VerificationResult]:
    """Valida assinatura e só então parseia o JSON do pedido.

    Args:
        raw_body: Corpo bruto do request
        headers: Headers recebidos
        secret: Secret do app Shopify

    Raises:
        InvalidSignatureError: Se assinatura for inválida
        InvalidJsonError: Se o JSON estiver inválido ou não for objeto

    Returns:
        (payload dict, VerificationResult)
    """
    result = verify_shopify_signature(raw_body, headers, secret)
    if not result.authentic:
        raise InvalidSignatureError(result.error or "invalid_signature")

    return parse_json_object(raw_body), result


def get_topic(headers: Mapping[str, str]) -> str:
    """Retorna o tópico do webhook (informativo, ex: orders/create)."""
    normalized = {key.lower(): value for key, value in headers.items()}
    return normalized.get(SHOPIFY_TOPIC_HEADER, "")
