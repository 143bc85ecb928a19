from __future__ import annotations

from dataclasses import dataclass

# Admin API revision the documents below were written against.
SCHEMA_VERSION = "2025-01"

USER_ERRORS_SELECTION_SET = """
userErrors {
  field
  message
  code
}
""".strip()

MONEY_BAG_SELECTION_SET = """
shopMoney {
  amount
  currencyCode
}
presentmentMoney {
  amount
  currencyCode
}
""".strip()

RETURN_APPROVE_REQUEST_MUTATION = f"""
mutation ReturnApproveRequest($input: ReturnApproveRequestInput!) {{
  returnApproveRequest(input: $input) {{
    return {{
      id
      name
      status
      totalQuantity
      order {{
        id
      }}
      returnLineItems(first: 50) {{
        edges {{
          node {{
            id
            quantity
            refundableQuantity
            refundedQuantity
            returnReason
            returnReasonNote
          }}
        }}
      }}
      refunds(first: 50) {{
        edges {{
          node {{
            id
            createdAt
            totalRefundedSet {{
              {MONEY_BAG_SELECTION_SET}
            }}
            refundLineItems(first: 10) {{
              edges {{
                node {{
                  id
                  quantity
                }}
              }}
            }}
            staffMember {{
              id
            }}
          }}
        }}
      }}
      returnShippingFees {{
        id
        amountSet {{
          {MONEY_BAG_SELECTION_SET}
        }}
      }}
      reverseFulfillmentOrders(first: 50) {{
        edges {{
          node {{
            id
            status
          }}
        }}
      }}
      exchangeLineItems(first: 50) {{
        edges {{
          node {{
            id
            lineItem {{
              id
              title
            }}
          }}
        }}
      }}
      decline {{
        reason
        note
      }}
    }}
    {USER_ERRORS_SELECTION_SET}
  }}
}}
""".strip()

# RefundCreate's userErrors type has no `code` field.
REFUND_CREATE_MUTATION = """
mutation RefundCreate($input: RefundInput!) {
  refundCreate(input: $input) {
    refund {
      id
      totalRefundedSet {
        presentmentMoney {
          amount
          currencyCode
        }
      }
    }
    userErrors {
      field
      message
    }
  }
}
""".strip()

RETURN_DECLINE_REQUEST_MUTATION = f"""
mutation ReturnDeclineRequest($input: ReturnDeclineRequestInput!) {{
  returnDeclineRequest(input: $input) {{
    return {{
      id
      status
    }}
    {USER_ERRORS_SELECTION_SET}
  }}
}}
""".strip()

RETURN_REFUND_MUTATION = f"""
mutation ReturnRefund($input: ReturnRefundInput!) {{
  returnRefund(returnRefundInput: $input) {{
    refund {{
      id
      note
      createdAt
    }}
    {USER_ERRORS_SELECTION_SET}
  }}
}}
""".strip()


@dataclass(frozen=True)
class GraphQLOperation:
    name: str
    root_field: str
    document: str


APPROVE_RETURN = GraphQLOperation("approve_return", "returnApproveRequest", RETURN_APPROVE_REQUEST_MUTATION)
CREATE_REFUND = GraphQLOperation("create_refund", "refundCreate", REFUND_CREATE_MUTATION)
CANCEL_RETURN = GraphQLOperation("cancel_return", "returnDeclineRequest", RETURN_DECLINE_REQUEST_MUTATION)
REFUND_RETURN = GraphQLOperation("refund_return", "returnRefund", RETURN_REFUND_MUTATION)

QUERY_CATALOG: dict[str, GraphQLOperation] = {
    operation.name: operation for operation in (APPROVE_RETURN, CREATE_REFUND, CANCEL_RETURN, REFUND_RETURN)
}


def get_operation(name: str) -> GraphQLOperation:
    return QUERY_CATALOG[name]
