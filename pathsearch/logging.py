"""Logging for the pathsearch package.

Every module logger lives below the ``pathsearch`` logger, which owns the one
handler of the package. Records are written to stderr, so anything a command
prints on stdout (search results, JSON documents) is never mixed with log
lines.
"""

import logging
import sys
from typing import IO, Optional

LOGGER_NAME = "pathsearch"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
    stream: Optional[IO[str]] = None,
) -> None:
    """Attach the package handler to the ``pathsearch`` logger.

    Only the first call has an effect; use ``reset_logging`` to start over.

    Args:
        level: Level of the ``pathsearch`` logger.
        format_string: Record format, ``DEFAULT_FORMAT`` if omitted.
        handler: Handler to install. Takes precedence over ``stream``.
        stream: Stream for the default ``StreamHandler``. Defaults to the
            current ``sys.stderr``.
    """
    global _configured

    if _configured:
        return

    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.setLevel(level)
    package_logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stderr if stream is None else stream)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    package_logger.addHandler(handler)

    # pytest's caplog listens on the root logger
    package_logger.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name``, inheriting the package level.

    Args:
        name: Logger name, normally the calling module's ``__name__``.
    """
    setup_root_logger()

    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the ``pathsearch`` logger and of its handlers."""
    setup_root_logger()

    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.setLevel(level)
    for handler in package_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    set_global_log_level(logging.INFO)


def level_from_flags(verbose: bool = False, quiet: bool = False) -> int:
    """Map the ``--verbose``/``--quiet`` command-line flags to a level.

    ``verbose`` wins when both are given.
    """
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def configure_cli_logging(
    verbose: bool = False, quiet: bool = False, stream: Optional[IO[str]] = None
) -> int:
    """Reinstall the package handler for a command-line run.

    The handler is rebuilt on every call so it writes to the ``sys.stderr``
    in effect at that moment, not the one seen at import time.

    Args:
        verbose: Log DEBUG records.
        quiet: Log only warnings and errors.
        stream: Destination stream, the current ``sys.stderr`` if omitted.

    Returns:
        The level that was applied.
    """
    level = level_from_flags(verbose, quiet)
    reset_logging()
    setup_root_logger(level=level, stream=stream)
    set_global_log_level(level)
    return level


def reset_logging() -> None:
    """Drop the package handler and level (used by the CLI and by tests)."""
    global _configured
    _configured = False

    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)


setup_root_logger()
