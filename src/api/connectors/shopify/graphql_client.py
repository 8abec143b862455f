"""Cliente HTTP para a Admin GraphQL API do Shopify.

Estende HttpClient genérico com:
- Header X-Shopify-Access-Token
- Tratamento de erros GraphQL de topo (``errors``)
- Logging estruturado sem tokens
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from app.infra.http import HttpClient, HttpClientConfig, HttpError

if TYPE_CHECKING:
    import httpx

    from config.settings import ShopifySettings

logger: logging.Logger = logging.getLogger(__name__)


class ShopifyGraphQLClient(HttpClient):
    """Cliente GraphQL da Admin API.

    userErrors de mutations não são tratados aqui: ficam em ``data`` e
    são repassados ao chamador.
    """

    def __init__(
        self,
        endpoint: str,
        access_token: str,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(config, transport=transport)
        self._endpoint = endpoint
        self._access_token = access_token

    async def execute(
        self,
        query: str,
        variables: dict[str, Any],
    ) -> dict[str, Any]:
        """Executa query/mutation e retorna o objeto ``data``.

        Raises:
            ValueError: Se access_token está vazio
            HttpError: Se erro HTTP, JSON inválido ou ``errors`` GraphQL
        """
        if not self._access_token or not self._access_token.strip():
            raise ValueError("access_token do Shopify é obrigatório")

        headers = {
            "Content-Type": "application/json",
            "X-Shopify-Access-Token": self._access_token,
        }
        response = await self.post(
            self._endpoint,
            json={"query": query, "variables": variables},
            headers=headers,
        )
        return self._process_response(response)

    def _process_response(self, response: httpx.Response) -> dict[str, Any]:
        if not response.is_success:
            logger.warning(
                "shopify_http_error",
                extra={"status_code": response.status_code},
            )
            raise HttpError("shopify_http_error", status_code=response.status_code)

        try:
            body = response.json()
        except json.JSONDecodeError as exc:
            logger.error("shopify_invalid_json_response")
            raise HttpError("shopify_invalid_json_response") from exc

        errors = body.get("errors") if isinstance(body, dict) else None
        if errors:
            logger.warning(
                "shopify_graphql_errors",
                extra={"error_count": len(errors) if isinstance(errors, list) else 1},
            )
            raise HttpError("shopify_graphql_errors", status_code=response.status_code)

        data = body.get("data") if isinstance(body, dict) else None
        if not isinstance(data, dict):
            raise HttpError("shopify_missing_data", status_code=response.status_code)

        logger.debug(
            "shopify_graphql_ok",
            extra={"status_code": response.status_code},
        )
        return data


def create_shopify_graphql_client(settings: ShopifySettings) -> ShopifyGraphQLClient:
    """Factory para criar cliente GraphQL a partir das settings."""
    return ShopifyGraphQLClient(
        endpoint=settings.graphql_endpoint,
        access_token=settings.admin_access_token,
        config=HttpClientConfig(timeout_seconds=settings.request_timeout_seconds),
    )
