"""Validação HMAC-SHA256 (base64) dos webhooks do Shopify."""

from __future__ import annotations

import base64
import hashlib
import hmac
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

SHOPIFY_HMAC_HEADER = "x-shopify-hmac-sha256"


@dataclass(frozen=True, slots=True)
class VerificationResult:
    """Resultado da verificação de assinatura (consumido uma única vez)."""

    authentic: bool
    error: str | None = None


def compute_shopify_hmac(raw_body: bytes, secret: bytes | str) -> str:
    """Calcula o HMAC-SHA256 em base64 sobre os bytes brutos do corpo."""
    key = secret.encode("utf-8") if isinstance(secret, str) else secret
    digest = hmac.new(key, raw_body, hashlib.sha256).digest()
    return base64.b64encode(digest).decode("ascii")


def verify_shopify_hmac(
    raw_body: bytes,
    signature_header: str | None,
    secret: bytes | str | None,
) -> bool:
    """Valida a assinatura enviada em X-Shopify-Hmac-Sha256.

    A comparação usa hmac.compare_digest, que é constant-time em relação
    à posição do primeiro byte divergente.

    Args:
        raw_body: Corpo bruto da requisição, exatamente como recebido
        signature_header: Valor do header de assinatura
        secret: Secret compartilhado do app Shopify

    Returns:
        True se assinatura válida. Secret vazio ou header ausente/malformado
        retornam False.
    """
    if not secret or not signature_header:
        return False
    try:
        expected = compute_shopify_hmac(raw_body, secret).encode("ascii")
        received = signature_header.encode("ascii")
    except (AttributeError, UnicodeEncodeError):
        return False
    return hmac.compare_digest(expected, received)


def verify_shopify_signature(
    raw_body: bytes,
    headers: Mapping[str, str],
    secret: bytes | str | None,
) -> VerificationResult:
    """Verifica assinatura a partir dos headers do request."""
    if not secret:
        return VerificationResult(authentic=False, error="missing_secret")

    normalized = {key.lower(): value for key, value in headers.items()}
    signature = normalized.get(SHOPIFY_HMAC_HEADER)
    if not signature:
        return VerificationResult(authentic=False, error="missing_signature")

    if not verify_shopify_hmac(raw_body, signature, secret):
        return VerificationResult(authentic=False, error="signature_mismatch")

    return VerificationResult(authentic=True)
