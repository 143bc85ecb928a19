from __future__ import annotations

from typing import Any


class ShopifyReturnsException(Exception):
    def __init__(
        self,
        *,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details


class InvalidArgument(ShopifyReturnsException, ValueError):
    """Missing credentials or a mandatory call parameter. Raised before any request is sent."""

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        super().__init__(code="invalid_argument", message=message, details=details)


class UpstreamShopifyException(ShopifyReturnsException):
    """The HTTP exchange itself failed: network error, non-2xx status or a body that is not JSON."""

    def __init__(
        self,
        *,
        code: str,
        message: str,
        upstream: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(code=code, message=message, details=upstream)
        self.upstream = upstream or {}


class GraphQLTransportError(ShopifyReturnsException):
    """The response carried a non-empty top-level ``errors`` list."""

    def __init__(self, *, errors: list[Any], shop_domain: str) -> None:
        super().__init__(
            code="graphql_errors",
            message=f"GraphQL Error: {shop_domain}",
            details={"shopDomain": shop_domain, "errors": errors},
        )
        self.errors = errors
        self.shop_domain = shop_domain


class GraphQLProtocolError(ShopifyReturnsException):
    """The response is missing ``data`` or the mutation's root field."""

    def __init__(self, *, missing_field: str, shop_domain: str) -> None:
        super().__init__(
            code="graphql_missing_field",
            message=f"GraphQL response missing field '{missing_field}': {shop_domain}",
            details={"shopDomain": shop_domain, "missingField": missing_field},
        )
        self.missing_field = missing_field
        self.shop_domain = shop_domain


class GraphQLUserError(ShopifyReturnsException):
    """The mutation ran but Shopify rejected it with ``userErrors``."""

    def __init__(self, *, user_errors: list[dict[str, Any]], shop_domain: str, root_field: str) -> None:
        super().__init__(
            code="graphql_user_errors",
            message=f"GraphQL Error: {shop_domain}",
            details={"shopDomain": shop_domain, "operation": root_field, "userErrors": user_errors},
        )
        self.user_errors = user_errors
        self.shop_domain = shop_domain
        self.root_field = root_field
