"""Logging configuration for docverify."""

import logging
import sys
from typing import Literal, TextIO

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]

# PDF and image libraries that log every parsed object at DEBUG
NOISY_LOGGERS = ("pdfminer", "pdfplumber", "pypdf", "PIL")


def setup_logging(
    level: LogLevel = "WARNING",
    format_string: str | None = None,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Set up logging for docverify.

    Log records go to stderr so JSON written to stdout stays parseable.

    Args:
        level: Logging level
        format_string: Custom format string (optional)
        stream: Output stream, stderr by default

    Returns:
        Configured logger
    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logger = logging.getLogger("docverify")
    logger.setLevel(getattr(logging, level))
    logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(getattr(logging, level))
    handler.setFormatter(logging.Formatter(format_string, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return logger


def get_logger(name: str = "docverify") -> logging.Logger:
    """Get a logger under the docverify namespace.

    Args:
        name: Logger name (will be prefixed with 'docverify.')

    Returns:
        Logger instance
    """
    if not name.startswith("docverify"):
        name = f"docverify.{name}"
    return logging.getLogger(name)
