"""Logging setup for cdp-client."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from cdp_client.config import get_config

if TYPE_CHECKING:
    from cdp_client.config import ClientConfig

LOGGER_NAME = "cdp_client"


class ClientLogHandler(logging.StreamHandler):
    """Stream handler installed by configure_logging."""


def configure_logging(config: ClientConfig | None = None) -> None:
    """Attach a stream handler to the cdp_client logger.

    Calling this again replaces the handler installed by the previous call.

    Args:
        config: Configuration to apply, defaults to the global one.

    Raises:
        ValueError: If the configured log level is not a known level name.
    """
    if config is None:
        config = get_config()
    level = logging.getLevelName(config.log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {config.log_level}")

    logger = logging.getLogger(LOGGER_NAME)
    for existing in list(logger.handlers):
        if isinstance(existing, ClientLogHandler):
            logger.removeHandler(existing)
            existing.close()

    handler = ClientLogHandler()
    handler.setFormatter(logging.Formatter(config.log_format))
    logger.addHandler(handler)
    logger.setLevel(level)
