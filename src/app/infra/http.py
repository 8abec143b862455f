"""Cliente HTTP base para chamadas a plataformas externas.

Uma única tentativa por chamada: retries ficam a cargo das plataformas
de origem (Shopify reenvia webhooks que não recebem 2xx).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import httpx

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 30.0


class HttpError(Exception):
    """Erro de requisição HTTP sem dados sensíveis."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        is_retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.is_retryable = is_retryable


class HttpClient:
    """Cliente HTTP simples para chamadas externas."""

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._transport = transport

    async def post(
        self,
        url: str,
        json: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Executa POST JSON.

        Status 429 e 5xx viram HttpError retentável; os demais são
        devolvidos para o chamador interpretar o corpo da resposta.
        """
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.post(
                    url,
                    json=json,
                    headers=headers,
                    timeout=self._config.timeout_seconds,
                )
        except httpx.TransportError as exc:
            logger.warning(
                "http_connection_error",
                extra={"error_type": type(exc).__name__},
            )
            raise HttpError("http_connection_error", is_retryable=True) from exc

        if response.status_code == 429 or response.status_code >= 500:
            raise HttpError(
                "http_retryable_status",
                status_code=response.status_code,
                is_retryable=True,
            )
        return response
