"""Logging for pathgraph.

Every module logs through a child of the ``pathgraph`` logger obtained with
`get_logger`. The first such call attaches one stream handler to the
``pathgraph`` logger at INFO level. Searches report their start and outcome
at DEBUG, so lower the level of ``logging.getLogger("pathgraph")`` (or one of
its children, such as ``pathgraph.algorithms.path_finder``) to trace them.
"""

import logging
import sys
from typing import Optional

LOGGER_NAME = "pathgraph"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Handler installed by setup_root_logger; None until the first setup
_handler: Optional[logging.Handler] = None


def setup_root_logger(
    level: int = logging.INFO,
    format_string: str = DEFAULT_FORMAT,
    handler: Optional[logging.Handler] = None,
) -> logging.Logger:
    """Attach a single handler to the ``pathgraph`` logger.

    Only the first call configures anything; later calls return the logger
    untouched until `reset_logging` is called. Records still propagate to the
    root logger.

    Args:
        level: Level of the ``pathgraph`` logger.
        format_string: Format for the installed handler.
        handler: Handler to install; a stdout stream handler by default.

    Returns:
        The ``pathgraph`` logger.
    """
    global _handler

    logger = logging.getLogger(LOGGER_NAME)
    if _handler is not None:
        return logger

    _handler = handler if handler is not None else logging.StreamHandler(sys.stdout)
    _handler.setFormatter(logging.Formatter(format_string))
    logger.addHandler(_handler)
    logger.setLevel(level)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return the logger for `name`, nested under ``pathgraph``.

    Names outside the ``pathgraph`` namespace are prefixed with it, so every
    record passes through the handler installed by `setup_root_logger`.
    """
    setup_root_logger()
    if name != LOGGER_NAME and not name.startswith(LOGGER_NAME + "."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def reset_logging() -> None:
    """Remove the handler installed by `setup_root_logger` and clear the level.

    Handlers added to the ``pathgraph`` logger by other code are left alone.
    """
    global _handler

    logger = logging.getLogger(LOGGER_NAME)
    if _handler is not None:
        logger.removeHandler(_handler)
        _handler = None
    logger.setLevel(logging.NOTSET)
