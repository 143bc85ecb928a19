from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from shopify_returns.core.exceptions import GraphQLProtocolError, GraphQLTransportError, GraphQLUserError

logger = logging.getLogger(__name__)


def unwrap_payload(response: Mapping[str, Any], root_field: str, *, shop_domain: str) -> dict[str, Any]:
    """Return ``data[root_field]`` or raise.

    Checks run in a fixed order: top-level ``errors`` first, then the shape of
    ``data``, then the payload's ``userErrors``. A response carrying both
    ``errors`` and a usable ``data`` still raises ``GraphQLTransportError``.
    """
    errors = response.get("errors")
    if errors:
        logger.warning("shop=%s operation=%s graphql_errors=%s", shop_domain, root_field, errors)
        raise GraphQLTransportError(errors=errors if isinstance(errors, list) else [errors], shop_domain=shop_domain)

    data = response.get("data")
    if not isinstance(data, Mapping):
        raise GraphQLProtocolError(missing_field="data", shop_domain=shop_domain)

    payload = data.get(root_field)
    if not isinstance(payload, Mapping):
        raise GraphQLProtocolError(missing_field=root_field, shop_domain=shop_domain)

    user_errors = payload.get("userErrors")
    if user_errors:
        logger.warning("shop=%s operation=%s user_errors=%s", shop_domain, root_field, user_errors)
        raise GraphQLUserError(user_errors=user_errors, shop_domain=shop_domain, root_field=root_field)

    return payload
