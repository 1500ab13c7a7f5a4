"""Python logging configuration for Southern Hemisphere Seasons."""

import logging
import os
import sys

# Between INFO and WARNING, used for "season selected" messages.
SUCCESS = 25
logging.addLevelName(SUCCESS, "SUCCESS")

LEVEL_ENV = "SHS_LOG_LEVEL"


def _level_from_env(default: int) -> int:
    name = os.environ.get(LEVEL_ENV, "").strip().upper()
    if not name:
        return default
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else default


def setup_logging(level: int = logging.INFO) -> None:
    """Configure root logger with console handler.

    ``SHS_LOG_LEVEL`` (e.g. ``DEBUG``, ``SUCCESS``) overrides *level*.
    """
    root = logging.getLogger()
    if root.handlers:
        return  # Already configured

    level = _level_from_env(level)
    root.setLevel(level)
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    fmt = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(fmt)
    root.addHandler(handler)

    # Flask dev server logs every request
    logging.getLogger("werkzeug").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a named logger, ensuring logging is configured."""
    setup_logging()
    return logging.getLogger(name)
