from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from shopify_returns.constants.graphql_queries import (
    APPROVE_RETURN,
    CANCEL_RETURN,
    CREATE_REFUND,
    REFUND_RETURN,
    GraphQLOperation,
)
from shopify_returns.core.config import Settings
from shopify_returns.schemas.returns import Identifier
from shopify_returns.services.response_normalizer import unwrap_payload
from shopify_returns.services.return_graphql_builder import (
    build_refund_create_variables,
    build_return_approve_variables,
    build_return_cancel_variables,
    build_return_refund_variables,
)
from shopify_returns.services.shopify_client import GraphQLTransport, ShopCredentials, ShopifyGraphQLClient

logger = logging.getLogger(__name__)


class ShopifyReturnsClient:
    """Return and refund mutations against one shop's Admin GraphQL API.

    Every method raises ``InvalidArgument`` before sending when its parameters
    are unusable, and otherwise returns the mutation's root payload, e.g.
    ``{"refund": {...}, "userErrors": []}`` for ``create_refund``.
    """

    def __init__(
        self,
        shop_domain: str | None,
        access_token: str | None,
        *,
        transport: GraphQLTransport | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.credentials = ShopCredentials.create(shop_domain, access_token)
        self._owns_transport = transport is None
        self.transport = transport or ShopifyGraphQLClient(self.credentials, settings=settings)

    @property
    def shop_domain(self) -> str:
        return self.credentials.shop_domain

    def _execute(self, operation: GraphQLOperation, variables: dict[str, Any]) -> dict[str, Any]:
        logger.info("shop=%s operation=%s", self.shop_domain, operation.root_field)
        response = self.transport.send(operation.document, variables, operation=operation.root_field)
        return unwrap_payload(response, operation.root_field, shop_domain=self.shop_domain)

    def approve_return(self, return_id: Identifier) -> dict[str, Any]:
        variables = build_return_approve_variables(return_id)
        return self._execute(APPROVE_RETURN, variables)

    def create_refund(self, order_id: Identifier, line_items: Iterable[Any]) -> dict[str, Any]:
        variables = build_refund_create_variables(order_id, line_items)
        return self._execute(CREATE_REFUND, variables)

    def cancel_return(
        self,
        return_id: Identifier,
        notify_customer: bool = False,
        decline_reason: str | None = None,
        decline_note: str | None = None,
    ) -> dict[str, Any]:
        variables = build_return_cancel_variables(return_id, notify_customer, decline_reason, decline_note)
        return self._execute(CANCEL_RETURN, variables)

    def refund_return(
        self,
        return_id: Identifier,
        notify_customer: bool,
        return_refund_line_items: Iterable[Any],
        order_transactions: Iterable[Any],
    ) -> dict[str, Any]:
        variables = build_return_refund_variables(
            return_id, notify_customer, return_refund_line_items, order_transactions
        )
        return self._execute(REFUND_RETURN, variables)

    def close(self) -> None:
        if self._owns_transport and isinstance(self.transport, ShopifyGraphQLClient):
            self.transport.close()

    def __enter__(self) -> ShopifyReturnsClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
