"""Testes do endpoint compartilhado /webhooks/orders."""

from __future__ import annotations

import json
from types import SimpleNamespace

import pytest
from starlette.requests import Request

from api.connectors.shopify import MUTATIONS
from api.payload_builders.whatsapp import OrderNotificationPayloadBuilder
from api.routes.orders import webhook
from app.bootstrap.dependencies import RelayComponents
from app.infra.http import HttpError
from app.use_cases.orders import ActionRouter, OrderNotifier
from tests.fakes.fake_clients import FakeGraphQLClient, FakeWhatsAppClient, sign_shopify

SECRET = "shpss_secret"
VERIFY_TOKEN = "verify-me"

ORDER_BODY = json.dumps(
    {
        "id": 1,
        "order_number": "#1001",
        "customer": {"first_name": "Ana"},
        "line_items": [{"title": "Mug", "quantity": 2}],
        "current_total_price": "19.99",
    }
).encode("utf-8")


def _relay(
    whatsapp: FakeWhatsAppClient | None = None,
    graphql: FakeGraphQLClient | None = None,
) -> RelayComponents:
    notifier = OrderNotifier(
        client=whatsapp or FakeWhatsAppClient(),
        builder=OrderNotificationPayloadBuilder("order_notification", "en_US"),
        endpoint="https://graph.facebook.com/v24.0/123/messages",
        access_token="token",
        recipient="5511999998888",
    )
    return RelayComponents(
        shopify_secret=SECRET,
        verify_token=VERIFY_TOKEN,
        notifier=notifier,
        action_router=ActionRouter(graphql or FakeGraphQLClient(), MUTATIONS),
    )


def _build_request(
    relay: RelayComponents,
    *,
    method: str,
    query_string: str = "",
    body: bytes = b"",
    headers: dict[str, str] | None = None,
) -> Request:
    header_items = headers or {}
    raw_headers = [(k.lower().encode("utf-8"), v.encode("utf-8")) for k, v in header_items.items()]
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": method,
        "path": webhook.WEBHOOK_PATH,
        "raw_path": webhook.WEBHOOK_PATH.encode("utf-8"),
        "query_string": query_string.encode("utf-8"),
        "headers": raw_headers,
        "app": SimpleNamespace(state=SimpleNamespace(relay=relay)),
    }
    sent = False

    async def _receive() -> dict[str, object]:
        nonlocal sent
        if sent:
            return {"type": "http.request", "body": b"", "more_body": False}
        sent = True
        return {"type": "http.request", "body": body, "more_body": False}

    return Request(scope, _receive)


def _button_reply(button_id: str) -> bytes:
    return json.dumps(
        {
            "object": "whatsapp_business_account",
            "entry": [
                {
                    "changes": [
                        {
                            "value": {
                                "messages": [
                                    {
                                        "type": "interactive",
                                        "interactive": {
                                            "type": "button_reply",
                                            "button_reply": {"id": button_id, "title": "Go"},
                                        },
                                    }
                                ]
                            }
                        }
                    ]
                }
            ],
        }
    ).encode("utf-8")


def _body(response: object) -> dict:
    return json.loads(response.body.decode("utf-8"))


@pytest.mark.asyncio
async def test_verify_webhook_returns_challenge() -> None:
    request = _build_request(
        _relay(),
        method="GET",
        query_string=f"hub.mode=subscribe&hub.verify_token={VERIFY_TOKEN}&hub.challenge=abc123",
    )

    response = await webhook.verify_webhook(request)

    assert response.status_code == 200
    assert response.body == b"abc123"
    assert response.media_type == "text/plain"


@pytest.mark.asyncio
async def test_verify_webhook_wrong_token() -> None:
    request = _build_request(
        _relay(),
        method="GET",
        query_string="hub.mode=subscribe&hub.verify_token=wrong&hub.challenge=abc123",
    )

    response = await webhook.verify_webhook(request)

    assert response.status_code == 403
    assert response.body == b"Forbidden"


@pytest.mark.asyncio
async def test_verify_webhook_without_params_is_health_check() -> None:
    response = await webhook.verify_webhook(_build_request(_relay(), method="GET"))

    assert response.status_code == 204


@pytest.mark.asyncio
async def test_signed_order_sends_notification() -> None:
    whatsapp = FakeWhatsAppClient()
    request = _build_request(
        _relay(whatsapp=whatsapp),
        method="POST",
        body=ORDER_BODY,
        headers={
            "X-Shopify-Hmac-Sha256": sign_shopify(ORDER_BODY, SECRET),
            "X-Shopify-Topic": "orders/create",
        },
    )

    response = await webhook.receive_webhook(request)

    assert response == {"success": True}
    assert len(whatsapp.calls) == 1
    payload = whatsapp.calls[0]["payload"]
    body = payload["template"]["components"][0]
    assert [param["text"] for param in body["parameters"]] == [
        "#1001",
        "Ana",
        "N/A",
        "N/A",
        "",
        "Mug",
        "2",
        "19.99",
    ]


@pytest.mark.asyncio
async def test_tampered_order_is_rejected() -> None:
    whatsapp = FakeWhatsAppClient()
    signature = sign_shopify(ORDER_BODY, SECRET)
    request = _build_request(
        _relay(whatsapp=whatsapp),
        method="POST",
        body=ORDER_BODY.replace(b"19.99", b"0.01"),
        headers={"X-Shopify-Hmac-Sha256": signature},
    )

    response = await webhook.receive_webhook(request)

    assert response.status_code == 401
    assert _body(response) == {"error": "invalid_signature"}
    assert whatsapp.calls == []


@pytest.mark.asyncio
async def test_signed_malformed_json_is_bad_request() -> None:
    whatsapp = FakeWhatsAppClient()
    body = b"{not json"
    request = _build_request(
        _relay(whatsapp=whatsapp),
        method="POST",
        body=body,
        headers={"X-Shopify-Hmac-Sha256": sign_shopify(body, SECRET)},
    )

    response = await webhook.receive_webhook(request)

    assert response.status_code == 400
    assert _body(response) == {"error": "invalid_json"}
    assert whatsapp.calls == []


@pytest.mark.asyncio
async def test_signed_order_without_id_is_bad_request() -> None:
    whatsapp = FakeWhatsAppClient()
    body = b'{"order_number": "#1"}'
    request = _build_request(
        _relay(whatsapp=whatsapp),
        method="POST",
        body=body,
        headers={"X-Shopify-Hmac-Sha256": sign_shopify(body, SECRET)},
    )

    response = await webhook.receive_webhook(request)

    assert response.status_code == 400
    assert _body(response) == {"error": "missing_order_id"}
    assert whatsapp.calls == []


@pytest.mark.asyncio
async def test_failed_send_is_bad_gateway() -> None:
    whatsapp = FakeWhatsAppClient(error=HttpError("whatsapp_http_error", status_code=400))
    request = _build_request(
        _relay(whatsapp=whatsapp),
        method="POST",
        body=ORDER_BODY,
        headers={"X-Shopify-Hmac-Sha256": sign_shopify(ORDER_BODY, SECRET)},
    )

    response = await webhook.receive_webhook(request)

    assert response.status_code == 502
    assert _body(response) == {"error": "notify_failed"}


@pytest.mark.asyncio
async def test_unsigned_order_is_unauthorized() -> None:
    whatsapp = FakeWhatsAppClient()
    request = _build_request(_relay(whatsapp=whatsapp), method="POST", body=ORDER_BODY)

    response = await webhook.receive_webhook(request)

    assert response.status_code == 401
    assert whatsapp.calls == []


@pytest.mark.asyncio
async def test_unsigned_malformed_body_is_unauthorized() -> None:
    whatsapp = FakeWhatsAppClient()
    request = _build_request(_relay(whatsapp=whatsapp), method="POST", body=b"{not json")

    response = await webhook.receive_webhook(request)

    assert response.status_code == 401
    assert whatsapp.calls == []


@pytest.mark.asyncio
async def test_reply_is_routed_by_body_shape_even_with_hmac_header() -> None:
    graphql = FakeGraphQLClient(data={"orderCancel": {"orderCancelUserErrors": []}})
    whatsapp = FakeWhatsAppClient()
    request = _build_request(
        _relay(whatsapp=whatsapp, graphql=graphql),
        method="POST",
        body=_button_reply("CANCEL_ORDER|gid://platform/Order/99"),
        headers={"X-Shopify-Hmac-Sha256": "x"},
    )

    response = await webhook.receive_webhook(request)

    assert response == {"handled": "CANCEL_ORDER"}
    assert graphql.calls[0]["variables"] == {"orderId": "gid://platform/Order/99"}
    assert whatsapp.calls == []


@pytest.mark.asyncio
async def test_cancel_order_reply_dispatches_mutation() -> None:
    graphql = FakeGraphQLClient(data={"orderCancel": {"orderCancelUserErrors": []}})
    request = _build_request(
        _relay(graphql=graphql),
        method="POST",
        body=_button_reply("CANCEL_ORDER|gid://platform/Order/99"),
    )

    response = await webhook.receive_webhook(request)

    assert response == {"handled": "CANCEL_ORDER"}
    assert len(graphql.calls) == 1
    assert "orderCancel" in graphql.calls[0]["query"]
    assert graphql.calls[0]["variables"] == {"orderId": "gid://platform/Order/99"}


@pytest.mark.asyncio
async def test_reply_with_user_errors() -> None:
    errors = [{"field": ["orderId"], "message": "Order has already been cancelled"}]
    graphql = FakeGraphQLClient(data={"orderCancel": {"orderCancelUserErrors": errors}})
    request = _build_request(
        _relay(graphql=graphql),
        method="POST",
        body=_button_reply("CANCEL_ORDER|5"),
    )

    response = await webhook.receive_webhook(request)

    assert response == {"handled": "CANCEL_ORDER", "userErrors": errors}


@pytest.mark.asyncio
async def test_unknown_action_reply_is_ignored() -> None:
    graphql = FakeGraphQLClient()
    request = _build_request(
        _relay(graphql=graphql),
        method="POST",
        body=_button_reply("BOGUS_ACTION|123"),
    )

    response = await webhook.receive_webhook(request)

    assert response == {"handled": None, "reason": "unrecognized_action"}
    assert graphql.calls == []


@pytest.mark.asyncio
async def test_reply_without_separator_is_ignored() -> None:
    graphql = FakeGraphQLClient()
    request = _build_request(
        _relay(graphql=graphql),
        method="POST",
        body=_button_reply("FULFILL_ORDER"),
    )

    response = await webhook.receive_webhook(request)

    assert response == {"handled": None, "reason": "unrecognized_action"}
    assert graphql.calls == []


@pytest.mark.asyncio
async def test_reply_dispatch_failure_is_acknowledged() -> None:
    graphql = FakeGraphQLClient(error=HttpError("shopify_http_error", status_code=500))
    request = _build_request(
        _relay(graphql=graphql),
        method="POST",
        body=_button_reply("FULFILL_ORDER|1"),
    )

    response = await webhook.receive_webhook(request)

    assert response == {"handled": "FULFILL_ORDER", "error": "mutation_dispatch_failed"}


@pytest.mark.asyncio
async def test_template_button_payload_is_routed() -> None:
    graphql = FakeGraphQLClient()
    body = json.dumps(
        {
            "object": "whatsapp_business_account",
            "entry": [
                {
                    "changes": [
                        {
                            "value": {
                                "messages": [
                                    {
                                        "type": "button",
                                        "button": {
                                            "payload": "READY_FOR_PICKUP|gid://shopify/FulfillmentOrder/3",
                                            "text": "Ready",
                                        },
                                    }
                                ]
                            }
                        }
                    ]
                }
            ],
        }
    ).encode("utf-8")
    request = _build_request(_relay(graphql=graphql), method="POST", body=body)

    response = await webhook.receive_webhook(request)

    assert response == {"handled": "READY_FOR_PICKUP"}
    assert graphql.calls[0]["variables"] == {
        "fulfillmentOrderId": "gid://shopify/FulfillmentOrder/3"
    }


@pytest.mark.asyncio
async def test_status_callback_is_acknowledged() -> None:
    graphql = FakeGraphQLClient()
    body = json.dumps(
        {
            "object": "whatsapp_business_account",
            "entry": [{"changes": [{"value": {"statuses": [{"status": "read"}]}}]}],
        }
    ).encode("utf-8")
    request = _build_request(_relay(graphql=graphql), method="POST", body=body)

    response = await webhook.receive_webhook(request)

    assert response == {"handled": None, "reason": "not_a_button_reply"}
    assert graphql.calls == []


@pytest.mark.asyncio
async def test_missing_notifier_is_internal_error() -> None:
    relay = RelayComponents(shopify_secret=SECRET, verify_token=VERIFY_TOKEN)
    request = _build_request(
        relay,
        method="POST",
        body=ORDER_BODY,
        headers={"X-Shopify-Hmac-Sha256": sign_shopify(ORDER_BODY, SECRET)},
    )

    response = await webhook.receive_webhook(request)

    assert response.status_code == 500
    assert _body(response) == {"error": "internal_error"}
