"""Settings específicas do Shopify.

Secret de webhook (HMAC) e credenciais da Admin GraphQL API.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

ADMIN_API_VERSION: str = "2025-01"


@dataclass(frozen=True)
class ShopifySettings:
    """Configurações da integração Shopify.

    Attributes:
        app_secret: Secret compartilhado para HMAC dos webhooks
        store_domain: Domínio da loja (ex: minha-loja.myshopify.com)
        admin_access_token: Token da Admin API
        api_version: Versão da Admin API
        request_timeout_seconds: Timeout para requisições HTTP
    """

    app_secret: str = ""
    store_domain: str = ""
    admin_access_token: str = ""
    api_version: str = ADMIN_API_VERSION
    request_timeout_seconds: float = 10.0

    @property
    def graphql_endpoint(self) -> str:
        """URL da Admin GraphQL API.

        Raises:
            ValueError: Se store_domain não configurado.
        """
        if not self.store_domain:
            raise ValueError("store_domain é obrigatório")
        domain = self.store_domain.removeprefix("https://").rstrip("/")
        return f"https://{domain}/admin/api/{self.api_version}/graphql.json"

    def validate(self) -> list[str]:
        """Valida configurações mínimas do Shopify.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.app_secret:
            errors.append("SHOPIFY_APP_SECRET não configurado")

        if not self.store_domain:
            errors.append("SHOPIFY_STORE_DOMAIN não configurado")

        if not self.admin_access_token:
            errors.append("SHOPIFY_ADMIN_ACCESS_TOKEN não configurado")

        if self.request_timeout_seconds <= 0:
            errors.append("SHOPIFY_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> ShopifySettings:
    """Carrega ShopifySettings a partir de variáveis de ambiente."""
    return ShopifySettings(
        app_secret=os.getenv("SHOPIFY_APP_SECRET", ""),
        store_domain=os.getenv("SHOPIFY_STORE_DOMAIN", ""),
        admin_access_token=os.getenv("SHOPIFY_ADMIN_ACCESS_TOKEN", ""),
        api_version=os.getenv("SHOPIFY_API_VERSION", ADMIN_API_VERSION),
        request_timeout_seconds=float(
            os.getenv("SHOPIFY_REQUEST_TIMEOUT_SECONDS", "10")
        ),
    )


@lru_cache(maxsize=1)
def get_shopify_settings() -> ShopifySettings:
    """Retorna instância cacheada de ShopifySettings."""
    return _load_from_env()
