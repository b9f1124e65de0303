"""Logging setup for the ``gateguard`` logger hierarchy.

Library modules only call ``logging.getLogger("gateguard.<area>")``.
Applications that want gateway records on stderr without configuring
logging themselves call ``configure_logging`` once at startup.
"""

import logging
import sys

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int = "info") -> logging.Logger:
    """Attach a stderr handler to the ``gateguard`` logger.

    Safe to call repeatedly; only one handler is ever installed. The root
    logger is left alone.
    """
    logger = logging.getLogger("gateguard")
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)

    if not any(getattr(h, "_gateguard", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler._gateguard = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger
