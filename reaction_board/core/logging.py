"""Logging setup shared by the API server and the terminal client."""

from __future__ import annotations

import logging

from .config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Install the root handler once; later calls only adjust the level."""

    resolved = (level or LOG_LEVEL).upper()
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=LOG_FORMAT)
    root.setLevel(resolved)


__all__ = ["LOG_FORMAT", "configure_logging"]
