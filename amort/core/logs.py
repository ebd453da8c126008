# amort/core/logs.py
"""
Process-wide logger for the CLI and I/O layers.

- stderr StreamHandler always; RotatingFileHandler under logs/ when AMORT_LOG_FILE is truthy.
- Level: DEBUG when AMORT_DEBUG is truthy (or force_debug), else WARNING.
- Idempotent: repeated calls reuse the same handlers.
"""

from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler

LOGGER_NAME = "amort"
LOG_PATH = os.path.join("logs", "amort.log")

_LOGGER: logging.Logger | None = None


def _truthy(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in {"1", "true", "yes", "on"}


def debug_enabled() -> bool:
    return _truthy("AMORT_DEBUG")


def get_logger(*, force_debug: bool = False) -> logging.Logger:
    """Create/reuse the "amort" logger."""
    global _LOGGER
    logger = _LOGGER or logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if (force_debug or debug_enabled()) else logging.WARNING)

    if _LOGGER is not None:
        return logger

    formatter = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="(%Y-%m-%d %H:%M:%S)",
    )

    # Avoid duplicate handlers if reloaded in REPL/tests
    if not logger.handlers:
        stream = logging.StreamHandler(sys.stderr)
        stream.setFormatter(formatter)
        logger.addHandler(stream)

        if _truthy("AMORT_LOG_FILE"):
            try:
                os.makedirs(os.path.dirname(LOG_PATH), exist_ok=True)
                handler = RotatingFileHandler(LOG_PATH, maxBytes=1_000_000, backupCount=3, encoding="utf-8")
                handler.setFormatter(formatter)
                logger.addHandler(handler)
            except OSError as e:
                logger.warning("file logging disabled: %s", e)

    _LOGGER = logger
    return logger


def child(name: str) -> logging.Logger:
    """Module logger under the "amort" hierarchy (inherits its handlers and level)."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
