"""Erros e helpers de parsing para API Meta/WhatsApp."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

_PERMANENT_CODES = frozenset({400, 401, 403, 404, 413})
_PERMANENT_TYPES = frozenset({"OAuthException", "InvalidRequest"})


@dataclass(frozen=True)
class WhatsAppApiError:
    """Erro retornado pela API Meta/WhatsApp."""

    error_type: str
    error_code: int
    error_message: str
    is_permanent: bool  # True se reenviar não resolve


def is_permanent_error(error_code: int, error_type: str) -> bool:
    """Classifica erro como permanente ou transitório.

    Erros permanentes: 400, 401, 403, 404, 413 e OAuthException/InvalidRequest.
    Demais (ex: 429, 5xx, 131xxx de throttling) são transitórios.
    """
    return error_code in _PERMANENT_CODES or error_type in _PERMANENT_TYPES


def parse_meta_error(response_data: Any) -> WhatsAppApiError | None:
    """Extrai o envelope ``error`` do response da Meta.

    Returns:
        WhatsAppApiError se houver erro, None se sucesso
    """
    if not isinstance(response_data, dict):
        return None
    error_obj = response_data.get("error")
    if not error_obj or not isinstance(error_obj, dict):
        return None

    error_type = str(error_obj.get("type", "unknown"))
    error_code = error_obj.get("code", 0)
    if not isinstance(error_code, int):
        error_code = 0

    return WhatsAppApiError(
        error_type=error_type,
        error_code=error_code,
        error_message=str(error_obj.get("message", "Erro desconhecido")),
        is_permanent=is_permanent_error(error_code, error_type),
    )

