"""Logger lookup shared by the library code and both services.

Until a service installs the JSON formatter (``configure_logging``), the first
``get_logger`` call falls back to a plain text root handler so library
modules still emit something when used on their own, e.g. in unit tests.
"""

from __future__ import annotations

import logging

_configured = False


def get_logger(name: str) -> logging.Logger:
    if not _configured:
        # no-op once the root logger has a handler
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )

    logger = logging.getLogger(name)
    logger.propagate = True
    return logger


def is_configured() -> bool:
    """True once the JSON formatter has been installed."""
    return _configured


def mark_configured():
    global _configured
    _configured = True
