"""Logging helpers shared by the ticketkeys modules."""

import hashlib
import logging

PACKAGE_LOGGER = 'ticketkeys'


def get_logger(name: str) -> logging.Logger:
    """Return a propagating logger for a ticketkeys module.

    Loggers hang off the root logger so that a plain basicConfig() in the
    host application is enough to see them. When the root logger has no
    handlers yet, the level falls back to WARNING so debug traces from
    the factor search stay quiet by default.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)
    logger.propagate = True

    if not logging.getLogger().handlers:
        logger.setLevel(logging.WARNING)

    return logger


def describe_buffer(data: bytes) -> str:
    """Describe a secret buffer by size and a short fingerprint.

    Key material never reaches the log; only its length and the first
    four bytes of its SHA-256 digest do.
    """
    if data is None:
        return '<none>'
    digest = hashlib.sha256(bytes(data)).hexdigest()[:8]
    return f"<{len(data)} bytes sha256:{digest}>"
