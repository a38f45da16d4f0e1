"""
Logging configuration for the command-line and HTTP entry points.
"""

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Configure the root logger with a console handler and optional file.

    Sets up the root logger with the given level, formatting with
    timestamps, and handlers for stderr and (optionally) a log file.
    Calling it again replaces the handlers it installed before.

    Args:
        level: Logging level name (e.g. "INFO", "DEBUG").
        log_file: Optional path of a file receiving DEBUG and above.
    """
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(level.upper())

    for handler in list(root_logger.handlers):
        if getattr(handler, "_flight_paths", False):
            root_logger.removeHandler(handler)

    # Console handler
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level.upper())
    console_handler.setFormatter(formatter)
    console_handler._flight_paths = True
    root_logger.addHandler(console_handler)

    # File handler
    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        file_handler._flight_paths = True
        root_logger.addHandler(file_handler)
