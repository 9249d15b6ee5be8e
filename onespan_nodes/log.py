"""
Logging setup for onespan_nodes.

All loggers live under the "onespan_nodes" namespace.
"""

import logging
import sys

ROOT_LOGGER = "onespan_nodes"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)


def configure_logging(level: str = "INFO") -> logging.Logger:
    """
    Attach a stdout handler to the package logger.

    Safe to call more than once: the handler is installed only once.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    if not any(getattr(h, "_onespan_nodes", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._onespan_nodes = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger


__all__ = ("ROOT_LOGGER", "LOG_FORMAT", "get_logger", "configure_logging")
