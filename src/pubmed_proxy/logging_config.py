"""Logging setup for the service and CLI."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Install a single stream handler on the root logger."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, force=True)
    # aiohttp access chatter is noise at INFO
    logging.getLogger("aiohttp").setLevel(logging.WARNING)
