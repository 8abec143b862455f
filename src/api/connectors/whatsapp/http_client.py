"""Cliente HTTP especializado para WhatsApp/Meta API.

Estende HttpClient genérico com comportamentos específicos de WhatsApp:
- Bearer token validado antes de qualquer envio
- Tratamento do envelope de erro Meta (error.type, error.code)
- Logging estruturado sem PII (tokens, números, conteúdo)
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from api.connectors.whatsapp.meta_errors import WhatsAppApiError, parse_meta_error
from api.connectors.whatsapp.meta_logging import log_meta_error, log_success
from app.infra.http import HttpClient, HttpClientConfig, HttpError

if TYPE_CHECKING:
    import httpx

    from config.settings import WhatsAppSettings

logger: logging.Logger = logging.getLogger(__name__)


class WhatsAppHttpClient(HttpClient):
    """Cliente HTTP especializado para Meta/WhatsApp API."""

    async def send_message(
        self,
        endpoint: str,
        access_token: str,
        payload: dict[str, Any],
    ) -> dict[str, Any]:
        """Envia mensagem via WhatsApp API.

        Args:
            endpoint: URL do endpoint (ex: .../messages)
            access_token: Bearer token para autenticação
            payload: Payload JSON da mensagem

        Returns:
            Response JSON da Meta

        Raises:
            ValueError: Se access_token está vazio
            HttpError: Se erro HTTP, transporte ou Meta
        """
        if not access_token or not access_token.strip():
            logger.error(
                "whatsapp_access_token_missing",
                extra={"endpoint": endpoint},
            )
            raise ValueError(
                "access_token é obrigatório para envio de mensagens. "
                "Verifique se WHATSAPP_ACCESS_TOKEN está configurado."
            )

        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {access_token}",
        }
        response = await self.post(endpoint, json=payload, headers=headers)
        return self._process_whatsapp_response(response, endpoint)

    def _process_whatsapp_response(
        self,
        response: httpx.Response,
        endpoint: str,
    ) -> dict[str, Any]:
        """Processa response da API Meta/WhatsApp."""
        try:
            response_data = response.json()
        except json.JSONDecodeError as exc:
            logger.error(
                "whatsapp_invalid_json_response",
                extra={"endpoint": endpoint, "status_code": response.status_code},
            )
            raise HttpError(
                "whatsapp_invalid_json_response",
                status_code=response.status_code,
            ) from exc

        meta_error = parse_meta_error(response_data)
        if meta_error:
            self._handle_meta_error(meta_error, endpoint, response.status_code)

        if not response.is_success:
            raise HttpError("whatsapp_http_error", status_code=response.status_code)

        log_success(endpoint, response.status_code)
        return response_data

    def _handle_meta_error(
        self,
        meta_error: WhatsAppApiError,
        endpoint: str,
        status_code: int,
    ) -> None:
        log_meta_error(meta_error, endpoint, status_code)
        raise HttpError(
            f"Meta API error: {meta_error.error_type} ({meta_error.error_code})",
            status_code=status_code,
            is_retryable=not meta_error.is_permanent,
        )


def create_whatsapp_http_client(settings: WhatsAppSettings) -> WhatsAppHttpClient:
    """Factory para criar cliente WhatsApp a partir das settings."""
    config = HttpClientConfig(timeout_seconds=settings.request_timeout_seconds)
    return WhatsAppHttpClient(config=config)
