"""Logging configuration for mockapi.

Library modules obtain loggers through ``get_logger(__name__)``; the
command-line entry point calls ``configure_logging`` once to attach a
rich console handler to the package logger.
"""

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "mockapi"
DEFAULT_LEVEL = os.environ.get("MOCKAPI_LOG_LEVEL", "WARNING").upper()


def get_logger(name: str) -> logging.Logger:
    """Return a logger below the package logger.

    Args:
        name: Usually the calling module's ``__name__``.
    """
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


def configure_logging(
    level: str | int | None = None,
    rich_output: bool = True,
    console: Console | None = None,
) -> logging.Logger:
    """Attach a handler to the package logger.

    Calling this more than once replaces the previous handler.

    Args:
        level: Log level name or number (defaults to ``MOCKAPI_LOG_LEVEL``).
        rich_output: Use ``RichHandler``; otherwise plain stderr output.
        console: Console for the rich handler (stderr by default).

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    resolved = level if level is not None else DEFAULT_LEVEL
    if isinstance(resolved, str):
        resolved = resolved.upper()
    logger.setLevel(resolved)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    if rich_output:
        handler: logging.Handler = RichHandler(
            console=console or Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
        )

    logger.addHandler(handler)
    logger.propagate = False
    return logger
