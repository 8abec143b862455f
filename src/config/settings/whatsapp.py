"""Settings específicas de WhatsApp.

Configurações do canal WhatsApp via Graph API: envio do template de
notificação e token esperado no handshake hub.* do webhook.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Constantes do Graph API
GRAPH_API_VERSION: str = "v24.0"
GRAPH_API_BASE_URL: str = "https://graph.facebook.com"

DEFAULT_TEMPLATE_NAME: str = "order_notification"
DEFAULT_TEMPLATE_LANGUAGE: str = "en_US"


@dataclass(frozen=True)
class WhatsAppSettings:
    """Configurações do canal WhatsApp.

    Attributes:
        verify_token: Token para verificação de webhook (hub.verify_token)
        access_token: Token de acesso à Graph API
        phone_number_id: ID do número remetente no Meta Business
        recipient_number: Destino das notificações de pedido
        template_name: Nome do template aprovado na Meta
        template_language: Código de idioma do template
        api_version: Versão da Graph API (ex: v24.0)
        api_base_url: URL base da Graph API
        request_timeout_seconds: Timeout para requisições HTTP
    """

    # Credenciais
    verify_token: str = ""
    access_token: str = ""
    phone_number_id: str = ""
    recipient_number: str = ""

    # Template
    template_name: str = DEFAULT_TEMPLATE_NAME
    template_language: str = DEFAULT_TEMPLATE_LANGUAGE

    # API
    api_version: str = GRAPH_API_VERSION
    api_base_url: str = GRAPH_API_BASE_URL
    request_timeout_seconds: float = 10.0

    @property
    def api_endpoint(self) -> str:
        """URL base completa da API com versão."""
        return f"{self.api_base_url}/{self.api_version}"

    def get_messages_endpoint(self) -> str:
        """Retorna URL para envio de mensagens.

        Returns:
            URL completa no formato: https://graph.facebook.com/v24.0/{id}/messages

        Raises:
            ValueError: Se phone_number_id não configurado.
        """
        if not self.phone_number_id:
            raise ValueError("phone_number_id é obrigatório")
        return f"{self.api_endpoint}/{self.phone_number_id}/messages"

    def validate(self) -> list[str]:
        """Valida configurações mínimas de WhatsApp.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.phone_number_id:
            errors.append("WHATSAPP_PHONE_NUMBER_ID não configurado")

        if not self.access_token:
            errors.append("WHATSAPP_ACCESS_TOKEN não configurado")

        if not self.recipient_number:
            errors.append("WHATSAPP_RECIPIENT_NUMBER não configurado")

        if not self.verify_token:
            errors.append("WHATSAPP_VERIFY_TOKEN não configurado")

        if self.request_timeout_seconds <= 0:
            errors.append("WHATSAPP_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> WhatsAppSettings:
    """Carrega WhatsAppSettings a partir de variáveis de ambiente."""
    return WhatsAppSettings(
        verify_token=os.getenv("WHATSAPP_VERIFY_TOKEN", ""),
        access_token=os.getenv("WHATSAPP_ACCESS_TOKEN", ""),
        phone_number_id=os.getenv("WHATSAPP_PHONE_NUMBER_ID", ""),
        recipient_number=os.getenv("WHATSAPP_RECIPIENT_NUMBER", ""),
        template_name=os.getenv("WHATSAPP_TEMPLATE_NAME", DEFAULT_TEMPLATE_NAME),
        template_language=os.getenv(
            "WHATSAPP_TEMPLATE_LANGUAGE", DEFAULT_TEMPLATE_LANGUAGE
        ),
        api_version=os.getenv("WHATSAPP_API_VERSION", GRAPH_API_VERSION),
        api_base_url=os.getenv("WHATSAPP_API_BASE_URL", GRAPH_API_BASE_URL),
        request_timeout_seconds=float(
            os.getenv("WHATSAPP_REQUEST_TIMEOUT_SECONDS", "10")
        ),
    )


@lru_cache(maxsize=1)
def get_whatsapp_settings() -> WhatsAppSettings:
    """Retorna instância cacheada de WhatsAppSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
