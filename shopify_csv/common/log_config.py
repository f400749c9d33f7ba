"""
Logging Configuration

Library modules only create loggers under the package logger; handlers are
attached here, by the CLI or by an application embedding the library.
Output goes to stderr so reports and CSV text on stdout stay clean.
"""

import logging
import sys
from typing import Optional, TextIO

from .constants import LOGGER_NAME

LOG_FORMAT = "%(levelname)-8s %(name)s: %(message)s"


def setup_logging(verbose: bool = False, quiet: bool = False,
                  stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Send package log records to a stream.

    Calling it again replaces the previous handler.

    Args:
        verbose: Log DEBUG records (takes precedence over quiet)
        quiet: Log only WARNING and above
        stream: Destination (default: sys.stderr)

    Returns:
        The package logger
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.setLevel(level)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    return package_logger
