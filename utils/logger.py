"""
utils/logger.py
---------------
Logging setup shared by the whole bot.
Modules obtain their logger through `get_logger(__name__)`.
"""

import logging
import sys

from config import LOG_LEVEL

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# httpx logs every Bot API request URL, and those URLs contain the token.
_NOISY_LOGGERS = ("httpx", "httpcore")

_configured = False


def _configure_root() -> None:
    """Attach the stdout handler to the root logger, once per process."""
    global _configured
    if _configured:
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    root = logging.getLogger()
    root.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))
    root.addHandler(handler)
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """
    Return a named logger, configuring output on first use.

    Args:
        name: Usually ``__name__`` of the calling module.
    """
    _configure_root()
    return logging.getLogger(name)
