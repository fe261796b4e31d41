"""Logging setup for invoice-payments.

Modules obtain loggers through get_logger(); nothing is emitted until the
application calls configure_logging() (the composition root does).
"""

from __future__ import annotations

import logging
import sys
import threading
from typing import IO, Any

__all__ = [
    "LOGGER_PREFIX",
    "configure_logging",
    "get_logger",
    "reset_logging",
]

LOGGER_PREFIX = "invoice_payments"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

_configured = False
_lock = threading.Lock()


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the invoice_payments namespace."""
    return logging.getLogger(f"{LOGGER_PREFIX}.{name}")


def configure_logging(
    *,
    level: int | str = logging.INFO,
    stream: IO[str] | Any = None,
    handler: logging.Handler | None = None,
) -> None:
    """Configure the invoice_payments logger hierarchy (idempotent)."""
    global _configured
    with _lock:
        if _configured:
            return
        _configured = True

    root_logger = logging.getLogger(LOGGER_PREFIX)
    root_logger.setLevel(level)
    root_logger.propagate = False

    h = handler if handler is not None else logging.StreamHandler(stream or sys.stderr)
    h.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(h)


def reset_logging() -> None:
    """Reset logging configuration. FOR TESTING ONLY."""
    global _configured
    with _lock:
        _configured = False
    logger = logging.getLogger(LOGGER_PREFIX)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
