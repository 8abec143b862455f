"""Filters de logging para injeção de contexto e mascaramento.

Campos injetados:
- correlation_id: ID de rastreamento da requisição
- service: Nome do serviço

Campos mascarados: qualquer atributo extra cujo nome indique
credencial (token, secret, signature, hmac, authorization).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

REDACTED = "[REDACTED]"

_SENSITIVE_MARKERS = ("token", "secret", "signature", "hmac", "authorization")

# Atributos padrão do LogRecord nunca são mascarados
_RESERVED_ATTRS = frozenset(vars(logging.makeLogRecord({})))


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.
            Se não fornecida, usa string vazia como fallback.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        """Adiciona correlation_id e service ao record.

        Se correlation_id já foi passado via `extra`, preserva o valor.
        """
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True


class SensitiveFieldFilter(logging.Filter):
    """Mascara valores de campos extra com nome de credencial."""

    def filter(self, record: logging.LogRecord) -> bool:
        for attr in list(vars(record)):
            if attr in _RESERVED_ATTRS:
                continue
            lowered = attr.lower()
            if any(marker in lowered for marker in _SENSITIVE_MARKERS):
                setattr(record, attr, REDACTED)
        return True
