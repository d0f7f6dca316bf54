"""
Logging setup for the `chatstore` logger hierarchy.

Every module logs through `logging.getLogger(__name__)`; applications that do
not configure logging themselves can call `configure_logging()` once at startup.
"""

import logging

from chatstore.database.config.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> logging.Logger:
    """
    Attach a stream handler to the `chatstore` logger.

    Parameters
    ----------
    level : str | None
        Log level name; defaults to `settings.LOG_LEVEL`.

    Returns
    -------
    logging.Logger
        The configured `chatstore` logger.
    """
    logger = logging.getLogger("chatstore")
    logger.setLevel((level or settings.LOG_LEVEL).upper())
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
