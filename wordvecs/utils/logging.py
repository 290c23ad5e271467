"""Logging for wordvecs.

Modules log through ``get_logger(__name__)``, so every record lands under the
``wordvecs`` logger. The package installs only a NullHandler; applications
either configure the root logger themselves or call ``setup_logging``.
"""
import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "wordvecs"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def setup_logging(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    log_file: Optional[str] = None,
    console: bool = True,
) -> logging.Logger:
    """Attach handlers to the ``wordvecs`` logger.

    Handlers from an earlier call are closed and replaced, so calling this
    twice doesn't duplicate output. Records stop propagating to the root
    logger while these handlers are installed.

    Args:
        level: Logging level (e.g., logging.INFO, logging.DEBUG)
        format_string: Custom format string for log messages
        log_file: Optional file path to write logs to
        console: Also log to stderr

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    formatter = logging.Formatter(format_string or DEFAULT_FORMAT)

    for handler in [h for h in logger.handlers if h.get_name() == PACKAGE_LOGGER]:
        logger.removeHandler(handler)
        handler.close()

    handlers = []
    if console:
        handlers.append(logging.StreamHandler(sys.stderr))
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        handler.set_name(PACKAGE_LOGGER)
        logger.addHandler(handler)

    logger.setLevel(level)
    logger.propagate = not handlers
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
