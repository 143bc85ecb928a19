from __future__ import annotations

from typing import Any

import pytest

from shopify_returns.core.config import reset_settings_cache

SHOP_DOMAIN = "demo-shop.myshopify.com"
ACCESS_TOKEN = "shpat_test_token"


class SpyTransport:
    def __init__(self, response: dict[str, Any] | None = None) -> None:
        self.response = response if response is not None else {}
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self.operations: list[str | None] = []

    def send(self, query: str, variables: dict[str, Any], *, operation: str | None = None) -> dict[str, Any]:
        self.calls.append((query, variables))
        self.operations.append(operation)
        return self.response


@pytest.fixture(autouse=True)
def _reset_singletons() -> None:
    reset_settings_cache()
    yield
    reset_settings_cache()


@pytest.fixture
def spy() -> SpyTransport:
    return SpyTransport()
