from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Protocol

import httpx

from shopify_returns.core.config import Settings, get_settings
from shopify_returns.core.exceptions import InvalidArgument, UpstreamShopifyException
from shopify_returns.services.return_graphql_builder import compact_json

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShopCredentials:
    shop_domain: str
    access_token: str

    @classmethod
    def create(cls, shop_domain: str | None, access_token: str | None) -> ShopCredentials:
        domain = normalize_shop_domain(shop_domain) if shop_domain else ""
        if not domain or not access_token:
            raise InvalidArgument("Shop domain and access token must be provided.")
        return cls(shop_domain=domain, access_token=access_token)


def normalize_shop_domain(shop_domain: str) -> str:
    domain = shop_domain.strip()
    for scheme in ("https://", "http://"):
        if domain.lower().startswith(scheme):
            domain = domain[len(scheme):]
            break
    return domain.rstrip("/")


class GraphQLTransport(Protocol):
    def send(self, query: str, variables: dict[str, Any], *, operation: str | None = None) -> dict[str, Any]: ...


class ShopifyGraphQLClient:
    """Authenticated POST of ``{query, variables}`` to the Admin GraphQL endpoint.

    Only HTTP-level failures are raised here. The parsed body is returned as-is,
    including any top-level ``errors``.
    """

    def __init__(self, credentials: ShopCredentials, *, settings: Settings | None = None) -> None:
        self.credentials = credentials
        self.settings = settings or get_settings()
        self._http = httpx.Client(timeout=self.settings.shopify_timeout_seconds)

    @property
    def endpoint(self) -> str:
        return (
            f"https://{self.credentials.shop_domain}/admin/api/"
            f"{self.settings.shopify_api_version}/graphql.json"
        )

    def send(self, query: str, variables: dict[str, Any], *, operation: str | None = None) -> dict[str, Any]:
        payload_json = compact_json({"query": query, "variables": variables})
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "X-Shopify-Access-Token": self.credentials.access_token,
        }
        shop = self.credentials.shop_domain
        start = time.perf_counter()

        try:
            response = self._http.post(self.endpoint, content=payload_json.encode("utf-8"), headers=headers)
        except httpx.HTTPError as exc:
            raise UpstreamShopifyException(
                code="shopify_network_error",
                message="Failed to communicate with Shopify API",
                upstream={"shopDomain": shop, "operation": operation, "reason": str(exc)},
            ) from exc

        elapsed_ms = round((time.perf_counter() - start) * 1000, 2)
        logger.info(
            "shop=%s operation=%s status=%s duration_ms=%s",
            shop,
            operation,
            response.status_code,
            elapsed_ms,
        )

        try:
            body = response.json()
        except ValueError as exc:
            raise UpstreamShopifyException(
                code="shopify_invalid_response",
                message="Shopify API returned invalid JSON",
                upstream={"shopDomain": shop, "operation": operation, "httpStatus": response.status_code},
            ) from exc

        if not response.is_success:
            raise UpstreamShopifyException(
                code="shopify_http_error",
                message="Shopify API returned unexpected HTTP status",
                upstream={
                    "shopDomain": shop,
                    "operation": operation,
                    "httpStatus": response.status_code,
                    "response": body if isinstance(body, dict) else {"raw": str(body)},
                },
            )

        if not isinstance(body, dict):
            raise UpstreamShopifyException(
                code="shopify_invalid_response",
                message="Shopify API returned unexpected payload type",
                upstream={"shopDomain": shop, "operation": operation, "httpStatus": response.status_code},
            )

        return body

    def close(self) -> None:
        self._http.close()
