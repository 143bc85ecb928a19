from __future__ import annotations

import logging

from shopify_returns.core.config import get_settings

PACKAGE_LOGGER = "shopify_returns"


def setup_logging(handler: logging.Handler | None = None) -> logging.Logger:
    """Attach a handler to the package logger only; the root logger is left alone."""
    settings = get_settings()
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))
    if handler is None and logger.handlers:
        return logger

    handler = handler or logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    logger.addHandler(handler)
    return logger
