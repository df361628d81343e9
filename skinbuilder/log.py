"""Logging setup for the skin builder."""

from __future__ import annotations

import logging
import os
import sys

LOG_FORMAT = "%(asctime)s - %(levelname)s - [%(name)s] - %(message)s"


def setup_logging(level: str | int | None = None) -> None:
    """Configure the ``skinbuilder`` logger once; later calls are no-ops.

    The level comes from ``level``, then ``SKINBUILDER_LOG_LEVEL``, then WARNING.
    """
    root = logging.getLogger("skinbuilder")
    if root.handlers:
        return

    if level is None:
        level = os.getenv("SKINBUILDER_LOG_LEVEL", "WARNING")
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(level)
