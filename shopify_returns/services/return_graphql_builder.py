from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from shopify_returns.core.exceptions import InvalidArgument
from shopify_returns.schemas.returns import (
    Identifier,
    OrderTransactionInput,
    RefundLineItemInput,
    ReturnRefundLineItemInput,
)

GID_PREFIX = "gid://shopify/"
DEFAULT_DECLINE_REASON = "OTHER"

ModelT = TypeVar("ModelT", bound=BaseModel)


def compact_json(payload: dict[str, Any], *, sort_keys: bool = False) -> str:
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False, sort_keys=sort_keys)


def gid(resource_type: str, resource_id: Identifier) -> str:
    # Plain concatenation: an id that is already a gid gets prefixed twice.
    return f"{GID_PREFIX}{resource_type}/{resource_id}"


def _validate_items(model: type[ModelT], items: Iterable[Any] | None, *, field: str) -> list[ModelT]:
    validated: list[ModelT] = []
    for index, item in enumerate(items or []):
        try:
            validated.append(model.model_validate(item))
        except ValidationError as exc:
            raise InvalidArgument(
                f"{field}[{index}] is invalid",
                details={"field": field, "index": index, "errors": exc.errors(include_url=False)},
            ) from exc
    return validated


def build_return_approve_variables(return_id: Identifier) -> dict[str, Any]:
    return {"input": {"id": gid("Return", return_id)}}


def build_refund_create_variables(order_id: Identifier, line_items: Iterable[Any] | None) -> dict[str, Any]:
    items = _validate_items(RefundLineItemInput, line_items, field="lineItems")
    if not items:
        raise InvalidArgument("lineItems missing!", details={"field": "lineItems"})

    return {
        "input": {
            "orderId": gid("Order", order_id),
            "refundLineItems": [
                {"lineItemId": gid("LineItem", item.lineItemId), "quantity": item.quantity} for item in items
            ],
        }
    }


def build_return_cancel_variables(
    return_id: Identifier,
    notify_customer: bool = False,
    decline_reason: str | None = None,
    decline_note: str | None = None,
) -> dict[str, Any]:
    input_payload: dict[str, Any] = {"id": gid("Return", return_id), "notifyCustomer": bool(notify_customer)}
    # declineReason is only sent alongside a note.
    if decline_note:
        input_payload["declineReason"] = decline_reason if decline_reason is not None else DEFAULT_DECLINE_REASON
        input_payload["declineNote"] = decline_note
    return {"input": input_payload}


def build_return_refund_variables(
    return_id: Identifier,
    notify_customer: bool,
    return_refund_line_items: Iterable[Any] | None,
    order_transactions: Iterable[Any] | None,
) -> dict[str, Any]:
    transactions = _validate_items(OrderTransactionInput, order_transactions, field="orderTransactions")
    if not transactions:
        raise InvalidArgument("orderTransactions missing!", details={"field": "orderTransactions"})
    line_items = _validate_items(ReturnRefundLineItemInput, return_refund_line_items, field="returnRefundLineItems")

    return {
        "input": {
            "notifyCustomer": bool(notify_customer),
            "returnId": gid("Return", return_id),
            "returnRefundLineItems": [
                {"returnLineItemId": gid("ReturnLineItem", item.returnLineItemId), "quantity": item.quantity}
                for item in line_items
            ],
            "orderTransactions": [
                {
                    "parentId": transaction.transactionId,
                    "transactionAmount": {
                        "amount": transaction.amount,
                        "currencyCode": transaction.currencyCode,
                    },
                }
                for transaction in transactions
            ],
        }
    }
