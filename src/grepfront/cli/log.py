"""Logging setup for the console script."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT: str = "%(levelname)s %(name)s: %(message)s"


def configure_logging(level: int | str = logging.WARNING) -> None:
    """Send log records to stderr at *level*.

    A no-op for handlers when logging was already configured (e.g. by an
    embedding application or pytest), but the level is always applied.
    """
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)
    logging.getLogger("grepfront").setLevel(level)
