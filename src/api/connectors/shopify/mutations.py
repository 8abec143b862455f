"""Mutations da Admin GraphQL API disparadas pelos botões.

Cada ActionKind aponta para exatamente uma mutation. O id recebido no
botão é repassado sem conversão, como referência de pedido (orderCancel)
ou de fulfillment order (demais mutations). Na Admin API 2025-01,
``fulfillmentCreate`` só aceita itens agrupados por fulfillment order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from app.constants.actions import ActionKind

FULFILL_ORDER_MUTATION = """
mutation fulfillOrder($fulfillmentOrderId: ID!) {
  fulfillmentCreate(
    fulfillment: {
      lineItemsByFulfillmentOrder: [{fulfillmentOrderId: $fulfillmentOrderId}]
      notifyCustomer: true
    }
  ) {
    fulfillment {
      id
      status
    }
    userErrors {
      field
      message
    }
  }
}
"""

CANCEL_FULFILLMENT_MUTATION = """
mutation cancelFulfillmentOrder($id: ID!) {
  fulfillmentOrderCancel(id: $id) {
    fulfillmentOrder {
      id
      status
    }
    userErrors {
      field
      message
    }
  }
}
"""

CANCEL_ORDER_MUTATION = """
mutation cancelOrder($orderId: ID!) {
  orderCancel(orderId: $orderId, reason: OTHER, refund: false, restock: true) {
    job {
      id
    }
    orderCancelUserErrors {
      field
      message
    }
  }
}
"""

READY_FOR_PICKUP_MUTATION = """
mutation readyForPickup($fulfillmentOrderId: ID!) {
  fulfillmentOrderLineItemsPreparedForPickup(
    input: {lineItemsByFulfillmentOrder: [{fulfillmentOrderId: $fulfillmentOrderId}]}
  ) {
    userErrors {
      field
      message
    }
  }
}
"""


@dataclass(frozen=True, slots=True)
class MutationSpec:
    """Mutation e nome da variável que recebe o id do botão.

    Attributes:
        name: Campo raiz da mutation no payload de resposta
        query: Documento GraphQL
        id_variable: Nome da variável que recebe o id
        user_errors_field: Campo com erros de negócio dentro do payload
    """

    name: str
    query: str
    id_variable: str
    user_errors_field: str = "userErrors"

    def variables(self, order_id: str) -> dict[str, Any]:
        return {self.id_variable: order_id}


MUTATIONS: dict[ActionKind, MutationSpec] = {
    ActionKind.FULFILL_ORDER: MutationSpec(
        name="fulfillmentCreate",
        query=FULFILL_ORDER_MUTATION,
        id_variable="fulfillmentOrderId",
    ),
    ActionKind.CANCEL_FULFILLMENT: MutationSpec(
        name="fulfillmentOrderCancel",
        query=CANCEL_FULFILLMENT_MUTATION,
        id_variable="id",
    ),
    ActionKind.CANCEL_ORDER: MutationSpec(
        name="orderCancel",
        query=CANCEL_ORDER_MUTATION,
        id_variable="orderId",
        user_errors_field="orderCancelUserErrors",
    ),
    ActionKind.READY_FOR_PICKUP: MutationSpec(
        name="fulfillmentOrderLineItemsPreparedForPickup",
        query=READY_FOR_PICKUP_MUTATION,
        id_variable="fulfillmentOrderId",
    ),
}

