# File: app/core/logging.py

"""
Application-wide logging configuration.

Every module logs through the standard ``logging`` package with one
console format:

    timestamp | level | logger name | message

``configure_logging`` is called once from ``create_application`` in
``app/main.py``; records go to stderr through the root handler.

Nothing in the service layer logs passwords, hashes or tokens. Emails and
user ids are fine to log.
"""

import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Configure the root logger.

    Parameters:
        level (str): "DEBUG", "INFO", "WARNING", "ERROR" or "CRITICAL".
            Unknown names fall back to INFO. Comes from ``LOG_LEVEL``.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )
    logging.getLogger(__name__).info("Logging initialized with level %s", level)


def get_logger(name: str) -> logging.Logger:
    """
    Return the logger for ``name``.

    Usage:
        from app.core.logging import get_logger
        logger = get_logger(__name__)
    """
    return logging.getLogger(name)
