"""Logging setup shared by all flownet modules.

Every module obtains its logger through ``get_logger(__name__)``; the loggers
hang off a single ``flownet`` logger that owns the only handler.

The starting level comes from ``FLOWNET_LOG_LEVEL`` (a level name such as
``DEBUG``) when set, else INFO. CLI flags override it.
"""

import logging
import os
import sys
from typing import Optional, TextIO

ROOT_LOGGER_NAME = "flownet"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

LOG_LEVEL_ENV = "FLOWNET_LOG_LEVEL"

_configured = False


def level_from_env(default: int = logging.INFO) -> int:
    """Level named by ``FLOWNET_LOG_LEVEL``; ``default`` if unset or unknown."""
    name = os.getenv(LOG_LEVEL_ENV)
    if not name:
        return default
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default


def setup_root_logger(
    level: Optional[int] = None,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Attach one handler to the ``flownet`` logger.

    Repeated calls are no-ops until ``reset_logging`` is called.

    Args:
        level: Level of the ``flownet`` logger; ``level_from_env()`` when omitted.
        format_string: Record format; ``DEFAULT_FORMAT`` when omitted.
        handler: Handler to install. Defaults to a ``StreamHandler``.
        stream: Stream for the default handler (stdout when omitted).
    """
    global _configured

    if _configured:
        return

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level_from_env() if level is None else level)
    root.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root.addHandler(handler)

    # Propagate so pytest's caplog sees records
    root.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``flownet`` hierarchy.

    Args:
        name: Logger name, normally ``__name__`` of the caller.

    Returns:
        Logger inheriting level and handler from the ``flownet`` logger.
    """
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the ``flownet`` logger and its handlers."""
    setup_root_logger()
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)
    for handler in root.handlers:
        handler.setLevel(level)


def configure_verbosity(verbose: bool = False, quiet: bool = False) -> int:
    """Map CLI verbosity flags to a log level and apply it.

    ``verbose`` wins over ``quiet``. Without either flag the level named by
    ``FLOWNET_LOG_LEVEL`` applies, else INFO.

    Returns:
        The level that was applied.
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = level_from_env()
    set_global_log_level(level)
    return level


def enable_debug_logging() -> None:
    """Enable debug logging for the entire package."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Return to INFO level."""
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop handlers and forget the configuration (used by tests)."""
    global _configured
    _configured = False

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.handlers.clear()
    root.setLevel(logging.NOTSET)


setup_root_logger()
