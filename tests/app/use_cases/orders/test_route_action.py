"""Testes do ActionRouter."""

from __future__ import annotations

import pytest

from api.connectors.shopify import MUTATIONS
from app.constants.actions import ActionKind
from app.infra.http import HttpError
from app.use_cases.orders import ActionRouter
from tests.fakes.fake_clients import FakeGraphQLClient
from utils.errors import MutationDispatchFailure


@pytest.mark.asyncio
async def test_unknown_action_makes_no_call() -> None:
    client = FakeGraphQLClient()

    result = await ActionRouter(client, MUTATIONS).route("BOGUS_ACTION", "123")

    assert result.handled is False
    assert result.action == "BOGUS_ACTION"
    assert client.calls == []


@pytest.mark.asyncio
async def test_cancel_order_dispatches_order_cancel() -> None:
    client = FakeGraphQLClient(
        data={"orderCancel": {"job": {"id": "gid://shopify/Job/1"}, "orderCancelUserErrors": []}}
    )

    result = await ActionRouter(client, MUTATIONS).route(
        "CANCEL_ORDER", "gid://platform/Order/99"
    )

    assert result.handled is True
    assert result.action == "CANCEL_ORDER"
    assert result.user_errors == []
    assert len(client.calls) == 1
    assert "orderCancel" in client.calls[0]["query"]
    assert client.calls[0]["variables"] == {"orderId": "gid://platform/Order/99"}


@pytest.mark.asyncio
@pytest.mark.parametrize("action", list(ActionKind))
async def test_each_action_sends_exactly_one_mutation(action: ActionKind) -> None:
    client = FakeGraphQLClient()
    mutation = MUTATIONS[action]

    result = await ActionRouter(client, MUTATIONS).route(action.value, "42")

    assert result.handled is True
    assert client.calls == [{"query": mutation.query, "variables": {mutation.id_variable: "42"}}]


@pytest.mark.asyncio
async def test_user_errors_are_surfaced() -> None:
    errors = [{"field": ["id"], "message": "Fulfillment order is closed"}]
    client = FakeGraphQLClient(
        data={"fulfillmentOrderCancel": {"fulfillmentOrder": None, "userErrors": errors}}
    )

    result = await ActionRouter(client, MUTATIONS).route("CANCEL_FULFILLMENT", "7")

    assert result.handled is True
    assert result.user_errors == errors


@pytest.mark.asyncio
async def test_dispatch_failure_is_wrapped() -> None:
    client = FakeGraphQLClient(error=HttpError("shopify_http_error", status_code=401))

    with pytest.raises(MutationDispatchFailure):
        await ActionRouter(client, MUTATIONS).route("FULFILL_ORDER", "1")

    assert len(client.calls) == 1
