"""Endpoint compartilhado de webhooks de pedidos.

Endpoints:
- GET /webhooks/orders: health check (204) ou handshake hub.* da Meta
- POST /webhooks/orders: pedido do Shopify ou resposta a botão do WhatsApp

Discriminação do POST pelo formato do corpo:
1. Corpo com resposta a botão (interactive.button_reply.id ou
   button.payload) → ActionRouter
2. Callback do WhatsApp sem botão (status etc.) → 200, ignorado
3. Qualquer outro corpo é tratado como pedido: assinatura validada sobre
   os bytes brutos antes do parse do pedido; sem assinatura válida → 401
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, Request, Response, status
from fastapi.responses import JSONResponse

from api.connectors.shopify.webhook import (
    InvalidJsonError,
    InvalidSignatureError,
    get_topic,
    parse_json_object,
    parse_order_webhook,
)
from api.connectors.whatsapp.webhook import (
    WebhookChallengeError,
    extract_button_reply_id,
    is_challenge_request,
    verify_webhook_challenge,
)
from api.normalizers.shopify import normalize_order
from app.domain.action_payload import InvalidActionPayloadError, decode_action_payload
from app.observability import correlation_scope
from utils.errors import MutationDispatchFailure, NotifyFailure

if TYPE_CHECKING:
    from app.bootstrap.dependencies import RelayComponents

logger = logging.getLogger(__name__)

WEBHOOK_PATH = "/webhooks/orders"
router = APIRouter(prefix=WEBHOOK_PATH)

WHATSAPP_OBJECT = "whatsapp_business_account"


def _get_relay(request: Request) -> RelayComponents:
    return request.app.state.relay


def _error(status_code: int, error: str) -> JSONResponse:
    return JSONResponse(content={"error": error}, status_code=status_code)


@router.get("")
async def verify_webhook(request: Request) -> Response:
    """Health check ou verificação de webhook (challenge da Meta).

    Returns:
        204 sem hub.*; texto do challenge (200) ou 403 no handshake.
    """
    params = request.query_params
    if not is_challenge_request(params):
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    hub_mode = params.get("hub.mode")
    try:
        challenge = verify_webhook_challenge(
            hub_mode=hub_mode,
            hub_verify_token=params.get("hub.verify_token"),
            hub_challenge=params.get("hub.challenge"),
            expected_token=_get_relay(request).verify_token,
        )
    except WebhookChallengeError as exc:
        logger.warning(
            "webhook_verification_failed",
            extra={"hub_mode": hub_mode, "error": str(exc)},
        )
        return Response(
            content="Forbidden",
            media_type="text/plain",
            status_code=status.HTTP_403_FORBIDDEN,
        )

    logger.info("webhook_verified", extra={"hub_mode": hub_mode})
    # Meta espera o challenge como texto puro
    return Response(
        content=challenge,
        media_type="text/plain",
        status_code=status.HTTP_200_OK,
    )


@router.post("", response_model=None)
async def receive_webhook(request: Request) -> Response | dict[str, Any]:
    """Recebe pedido do Shopify ou resposta a botão do WhatsApp.

    A resposta reflete o resultado da chamada outbound, feita inline.
    """
    with correlation_scope(request.headers.get("x-correlation-id")):
        relay = _get_relay(request)
        raw_body = await request.body()
        headers = dict(request.headers)

        try:
            callback = _sniff_callback(raw_body)
            if callback is not None:
                button_id = extract_button_reply_id(callback)
                if button_id is not None:
                    return await _handle_button_reply(relay, button_id)
                if callback.get("object") == WHATSAPP_OBJECT:
                    logger.info("whatsapp_callback_ignored")
                    return {"handled": None, "reason": "not_a_button_reply"}

            return await _handle_order_event(relay, raw_body, headers)

        except InvalidSignatureError as exc:
            logger.warning(
                "webhook_signature_invalid",
                extra={"error": str(exc), "payload_size": len(raw_body)},
            )
            return _error(status.HTTP_401_UNAUTHORIZED, "invalid_signature")

        except InvalidJsonError as exc:
            logger.warning("webhook_payload_invalid", extra={"error": str(exc)})
            return _error(status.HTTP_400_BAD_REQUEST, str(exc))

        except NotifyFailure:
            return _error(status.HTTP_502_BAD_GATEWAY, "notify_failed")

        except Exception:
            logger.exception("webhook_processing_failed")
            return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "internal_error")


def _sniff_callback(raw_body: bytes) -> dict[str, Any] | None:
    """Parse usado só para discriminar o formato do corpo.

    Nada do resultado é usado no fluxo de pedido, que parseia de novo
    depois de validar a assinatura.
    """
    try:
        return parse_json_object(raw_body)
    except InvalidJsonError:
        return None


async def _handle_order_event(
    relay: RelayComponents,
    raw_body: bytes,
    headers: dict[str, str],
) -> dict[str, Any]:
    payload, _result = parse_order_webhook(raw_body, headers, relay.shopify_secret)
    order = normalize_order(payload)
    logger.info(
        "order_webhook_received",
        extra={"topic": get_topic(headers), "order_id": order.id},
    )

    if relay.notifier is None:
        raise RuntimeError("order_notifier_not_configured")

    await relay.notifier.notify(order)
    return {"success": True}


async def _handle_button_reply(relay: RelayComponents, button_id: str) -> dict[str, Any]:
    try:
        action = decode_action_payload(button_id)
    except InvalidActionPayloadError as exc:
        logger.warning("action_payload_invalid", extra={"error": str(exc)})
        return {"handled": None, "reason": "unrecognized_action"}

    if relay.action_router is None:
        raise RuntimeError("action_router_not_configured")

    try:
        result = await relay.action_router.route(action.action, action.order_id)
    except MutationDispatchFailure:
        # 200 mesmo em falha: evita retries do WhatsApp; o erro já foi logado
        return {"handled": action.action, "error": "mutation_dispatch_failed"}

    if not result.handled:
        return {"handled": None, "reason": "unrecognized_action"}

    body: dict[str, Any] = {"handled": result.action}
    if result.user_errors:
        body["userErrors"] = result.user_errors
    return body
