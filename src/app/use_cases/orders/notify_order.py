"""Use case de notificação de pedido via template WhatsApp."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.infra.http import HttpError
from app.protocols.models import OutboundSendResult
from utils.errors import NotifyFailure

if TYPE_CHECKING:
    from app.domain.order_event import OrderEvent
    from app.protocols.http_client import WhatsAppHttpClientProtocol
    from app.protocols.payload_builder import OrderNotificationBuilderProtocol

logger = logging.getLogger(__name__)


class OrderNotifier:
    """Envia um template por pedido, em uma única chamada, sem retry.

    Webhooks duplicados do Shopify geram notificações duplicadas: não há
    deduplicação aqui.
    """

    def __init__(
        self,
        client: WhatsAppHttpClientProtocol,
        builder: OrderNotificationBuilderProtocol,
        *,
        endpoint: str,
        access_token: str,
        recipient: str,
    ) -> None:
        self._client = client
        self._builder = builder
        self._endpoint = endpoint
        self._access_token = access_token
        self._recipient = recipient

    async def notify(self, order: OrderEvent) -> OutboundSendResult:
        """Monta e envia a notificação do pedido.

        Raises:
            NotifyFailure: Em status não-2xx, erro Meta ou falha de transporte
        """
        payload = self._builder.build(order, self._recipient)

        try:
            response = await self._client.send_message(
                endpoint=self._endpoint,
                access_token=self._access_token,
                payload=payload,
            )
        except (HttpError, ValueError) as exc:
            logger.error(
                "order_notify_failed",
                extra={
                    "order_id": order.id,
                    "error_type": type(exc).__name__,
                    "status_code": getattr(exc, "status_code", None),
                    "retryable": getattr(exc, "is_retryable", False),
                },
            )
            raise NotifyFailure(str(exc)) from exc

        message_id = _extract_message_id(response)
        logger.info(
            "order_notified",
            extra={"order_id": order.id, "message_id": message_id},
        )
        return OutboundSendResult(success=True, message_id=message_id)


def _extract_message_id(response: dict[str, Any]) -> str | None:
    """Retorna ``messages[0].id`` (wamid) do response de envio, se houver."""
    messages = response.get("messages")
    if not isinstance(messages, list) or not messages or not isinstance(messages[0], dict):
        return None
    message_id = messages[0].get("id")
    return str(message_id) if message_id else None
