from __future__ import annotations

from typing import Any, Callable

import pytest

from shopify_returns import (
    GraphQLProtocolError,
    GraphQLTransportError,
    GraphQLUserError,
    InvalidArgument,
    ShopifyReturnsClient,
)
from shopify_returns.constants.graphql_queries import (
    REFUND_CREATE_MUTATION,
    RETURN_APPROVE_REQUEST_MUTATION,
    RETURN_DECLINE_REQUEST_MUTATION,
    RETURN_REFUND_MUTATION,
)

from tests.conftest import ACCESS_TOKEN, SHOP_DOMAIN, SpyTransport

OPERATIONS: list[tuple[str, Callable[[ShopifyReturnsClient], Any]]] = [
    ("returnApproveRequest", lambda client: client.approve_return("1")),
    ("refundCreate", lambda client: client.create_refund("2", [{"lineItemId": "3", "quantity": 1}])),
    ("returnDeclineRequest", lambda client: client.cancel_return("4", decline_note="damaged")),
    (
        "returnRefund",
        lambda client: client.refund_return(
            "5",
            False,
            [{"returnLineItemId": "6", "quantity": 1}],
            [{"transactionId": "7", "amount": "1.00", "currencyCode": "USD"}],
        ),
    ),
]


def _client(spy: SpyTransport) -> ShopifyReturnsClient:
    return ShopifyReturnsClient(SHOP_DOMAIN, ACCESS_TOKEN, transport=spy)


@pytest.mark.parametrize(
    ("shop_domain", "access_token"),
    [(None, ACCESS_TOKEN), ("", ACCESS_TOKEN), (SHOP_DOMAIN, None), (SHOP_DOMAIN, ""), ("https://", ACCESS_TOKEN)],
)
def test_constructor_requires_credentials(shop_domain, access_token) -> None:
    with pytest.raises(InvalidArgument, match="Shop domain and access token must be provided."):
        ShopifyReturnsClient(shop_domain, access_token, transport=SpyTransport())


def test_approve_return_sends_catalog_document(spy: SpyTransport) -> None:
    payload = {"return": {"id": "gid://shopify/Return/1", "status": "OPEN"}, "userErrors": []}
    spy.response = {"data": {"returnApproveRequest": payload}}

    assert _client(spy).approve_return("1") == payload
    assert spy.calls == [(RETURN_APPROVE_REQUEST_MUTATION, {"input": {"id": "gid://shopify/Return/1"}})]


def test_create_refund_returns_refund_unchanged(spy: SpyTransport) -> None:
    refund = {
        "id": "gid://shopify/Refund/10",
        "totalRefundedSet": {"presentmentMoney": {"amount": "12.50", "currencyCode": "USD"}},
    }
    spy.response = {"data": {"refundCreate": {"refund": refund, "userErrors": []}}}

    result = _client(spy).create_refund("2", [{"lineItemId": "3", "quantity": 1}])

    assert result["refund"] == refund
    query, variables = spy.calls[0]
    assert query == REFUND_CREATE_MUTATION
    assert variables["input"]["orderId"] == "gid://shopify/Order/2"


def test_create_refund_user_errors(spy: SpyTransport) -> None:
    user_errors = [{"field": "orderId", "message": "not found"}]
    spy.response = {"data": {"refundCreate": {"userErrors": user_errors}}}

    with pytest.raises(GraphQLUserError) as exc_info:
        _client(spy).create_refund("2", [{"lineItemId": "3", "quantity": 1}])

    assert exc_info.value.user_errors == [{"field": "orderId", "message": "not found"}]
    assert exc_info.value.shop_domain == SHOP_DOMAIN


def test_cancel_return_sends_decline_input(spy: SpyTransport) -> None:
    spy.response = {"data": {"returnDeclineRequest": {"return": {"id": "x", "status": "DECLINED"}, "userErrors": []}}}

    result = _client(spy).cancel_return("4", notify_customer=True, decline_note="Used item")

    assert result["return"]["status"] == "DECLINED"
    query, variables = spy.calls[0]
    assert query == RETURN_DECLINE_REQUEST_MUTATION
    assert variables == {
        "input": {
            "id": "gid://shopify/Return/4",
            "notifyCustomer": True,
            "declineReason": "OTHER",
            "declineNote": "Used item",
        }
    }


def test_refund_return_sends_refund_input(spy: SpyTransport) -> None:
    spy.response = {"data": {"returnRefund": {"refund": {"id": "r"}, "userErrors": []}}}

    _client(spy).refund_return(
        "5",
        True,
        [{"returnLineItemId": "6", "quantity": 1}],
        [{"transactionId": "7", "amount": "1.00", "currencyCode": "USD"}],
    )

    query, variables = spy.calls[0]
    assert query == RETURN_REFUND_MUTATION
    assert variables["input"]["returnId"] == "gid://shopify/Return/5"
    assert variables["input"]["orderTransactions"][0]["parentId"] == "7"


def test_refund_return_without_transactions_never_calls_transport(spy: SpyTransport) -> None:
    with pytest.raises(InvalidArgument):
        _client(spy).refund_return("5", False, [{"returnLineItemId": "6", "quantity": 1}], [])
    assert spy.calls == []


def test_create_refund_without_line_items_never_calls_transport(spy: SpyTransport) -> None:
    with pytest.raises(InvalidArgument):
        _client(spy).create_refund("2", [])
    assert spy.calls == []


@pytest.mark.parametrize(("root_field", "call"), OPERATIONS)
def test_every_operation_raises_on_top_level_errors(spy: SpyTransport, root_field: str, call) -> None:
    spy.response = {
        "errors": [{"message": "throttled"}],
        "data": {root_field: {"userErrors": []}},
    }
    with pytest.raises(GraphQLTransportError) as exc_info:
        call(_client(spy))
    assert exc_info.value.errors == [{"message": "throttled"}]
    assert len(spy.calls) == 1


@pytest.mark.parametrize(("root_field", "call"), OPERATIONS)
def test_every_operation_raises_on_missing_root_field(spy: SpyTransport, root_field: str, call) -> None:
    spy.response = {"data": {}}
    with pytest.raises(GraphQLProtocolError) as exc_info:
        call(_client(spy))
    assert exc_info.value.missing_field == root_field


def test_context_manager_leaves_injected_transport_open(spy: SpyTransport) -> None:
    spy.response = {"data": {"returnApproveRequest": {"userErrors": []}}}
    with _client(spy) as client:
        client.approve_return("1")
    assert len(spy.calls) == 1


@pytest.mark.parametrize(("root_field", "call"), OPERATIONS)
def test_every_operation_names_itself_to_the_transport(spy: SpyTransport, root_field: str, call) -> None:
    spy.response = {"data": {root_field: {"userErrors": []}}}
    call(_client(spy))
    assert spy.operations == [root_field]


def test_context_manager_closes_its_own_http_client() -> None:
    with ShopifyReturnsClient(SHOP_DOMAIN, ACCESS_TOKEN) as client:
        http = client.transport._http
        assert not http.is_closed
    assert http.is_closed
