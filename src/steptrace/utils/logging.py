"""Logging configuration for steptrace."""

import logging
import sys


def get_logger(name: str) -> logging.Logger:
    """Get a namespaced logger for a steptrace module.

    Args:
        name: Module name (e.g., 'steptrace.core.timeline')

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def configure_logging(
    level: int = logging.INFO,
    fmt: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
) -> None:
    """Attach a stderr handler to the root steptrace logger.

    Calling it again only changes the level.

    Args:
        level: Logging level (default INFO)
        fmt: Log format string
    """
    logger = logging.getLogger("steptrace")
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(fmt))
        logger.addHandler(handler)
    logger.setLevel(level)
