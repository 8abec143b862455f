"""Use case de roteamento de respostas a botões para mutations Shopify."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.constants.actions import ActionKind
from app.infra.http import HttpError
from app.protocols.models import MutationResult
from utils.errors import MutationDispatchFailure

if TYPE_CHECKING:
    from collections.abc import Mapping

    from api.connectors.shopify.mutations import MutationSpec
    from app.protocols.http_client import ShopifyGraphQLClientProtocol

logger = logging.getLogger(__name__)


class ActionRouter:
    """Despacha exatamente uma mutation por resposta.

    Não há estado local de fulfillment: transições inválidas (ex: cancelar
    pedido já cancelado) são recusadas pelo Shopify e voltam em userErrors.
    """

    def __init__(
        self,
        client: ShopifyGraphQLClientProtocol,
        mutations: Mapping[ActionKind, MutationSpec],
    ) -> None:
        self._client = client
        self._mutations = mutations

    async def route(self, action_kind: str, order_id: str) -> MutationResult:
        """Executa a mutation associada à ação.

        Ação desconhecida é logada e ignorada (nenhuma chamada outbound).

        Raises:
            MutationDispatchFailure: Se a chamada ao Shopify falhar
        """
        try:
            action = ActionKind(action_kind)
        except ValueError:
            logger.warning(
                "action_unrecognized",
                extra={"action_kind": action_kind, "order_id": order_id},
            )
            return MutationResult.unhandled(action_kind, order_id)

        mutation = self._mutations[action]
        try:
            data = await self._client.execute(
                mutation.query,
                mutation.variables(order_id),
            )
        except (HttpError, ValueError) as exc:
            logger.error(
                "action_dispatch_failed",
                extra={
                    "action_kind": action.value,
                    "order_id": order_id,
                    "error_type": type(exc).__name__,
                    "status_code": getattr(exc, "status_code", None),
                    "retryable": getattr(exc, "is_retryable", False),
                },
            )
            raise MutationDispatchFailure(str(exc)) from exc

        payload = data.get(mutation.name)
        payload = payload if isinstance(payload, dict) else {}
        user_errors = _as_error_list(payload.get(mutation.user_errors_field))

        log = logger.warning if user_errors else logger.info
        log(
            "action_dispatched",
            extra={
                "action_kind": action.value,
                "order_id": order_id,
                "user_error_count": len(user_errors),
            },
        )
        return MutationResult(
            action=action.value,
            order_id=order_id,
            handled=True,
            data=payload,
            user_errors=user_errors,
        )


def _as_error_list(value: Any) -> list[dict[str, Any]]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]
