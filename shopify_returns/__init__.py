from shopify_returns.core.exceptions import (
    GraphQLProtocolError,
    GraphQLTransportError,
    GraphQLUserError,
    InvalidArgument,
    ShopifyReturnsException,
    UpstreamShopifyException,
)
from shopify_returns.services.returns_client import ShopifyReturnsClient

__all__ = [
    "GraphQLProtocolError",
    "GraphQLTransportError",
    "GraphQLUserError",
    "InvalidArgument",
    "ShopifyReturnsClient",
    "ShopifyReturnsException",
    "UpstreamShopifyException",
]
