"""Package-wide logging setup for costgraph.

All modules log through children of the ``costgraph`` logger. The parent is
configured once, on import, with a single stdout handler; children never get
handlers of their own and only inherit the parent's level.
"""

import logging
import sys
from typing import Optional

#: Name of the parent logger every costgraph module logs under.
ROOT_LOGGER_NAME = "costgraph"

#: Record format used by the default handler.
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach a single handler to the ``costgraph`` logger.

    Repeated calls are no-ops until ``reset_logging()`` is called.

    Args:
        level: Initial level of the ``costgraph`` logger.
        format_string: Record format; ``DEFAULT_FORMAT`` when omitted.
        handler: Handler to install; a stdout ``StreamHandler`` when omitted.
    """
    global _configured

    if _configured:
        return

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root_logger.addHandler(handler)

    # Propagate so pytest's caplog sees the records.
    root_logger.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a module logger that inherits the ``costgraph`` configuration.

    Args:
        name: Logger name, normally ``__name__`` of the calling module.

    Returns:
        The logger, with its own level reset to ``NOTSET``.
    """
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the ``costgraph`` logger and its handlers."""
    setup_root_logger()
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def reset_logging() -> None:
    """Drop the installed handler so the next call reconfigures from scratch."""
    global _configured
    _configured = False

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()
