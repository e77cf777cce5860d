"""
PokerTrack – Logging configuration
====================================
Readable structured logging for development, one handler on the root
logger configured at startup.
"""

from __future__ import annotations

import logging
import sys


def setup_logging(level: int = logging.INFO) -> None:
    """Configure the root logger once at startup."""
    fmt = (
        "%(asctime)s | %(levelname)-8s | %(name)-30s | %(message)s"
    )
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt, datefmt="%Y-%m-%d %H:%M:%S"))

    root = logging.getLogger()
    # Avoid duplicate handlers when called more than once
    if not root.handlers:
        root.addHandler(handler)
    root.setLevel(level)

    # Noisy libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Logger factory with the project namespace prefixed."""
    return logging.getLogger(f"pokertrack.{name}")
