"""
Logging configuration for xcresult-summary.
"""

import logging
import sys
from typing import Optional


class ColoredFormatter(logging.Formatter):
    """Colored formatter for console output."""

    # ANSI color codes
    COLORS = {
        'DEBUG': '\033[36m',     # Cyan
        'INFO': '\033[94m',      # Blue
        'WARNING': '\033[93m',   # Yellow
        'ERROR': '\033[91m',     # Red
        'CRITICAL': '\033[95m',  # Magenta
        'RESET': '\033[0m',
        'BOLD': '\033[1m',
    }

    def format(self, record):
        """Format log record with colors."""
        levelname, msg = record.levelname, record.msg
        if levelname in self.COLORS:
            record.levelname = f"{self.COLORS[levelname]}{levelname}{self.COLORS['RESET']}"
        if levelname in ['ERROR', 'CRITICAL']:
            record.msg = f"{self.COLORS['BOLD']}{record.msg}{self.COLORS['RESET']}"
        try:
            return super().format(record)
        finally:
            # Other handlers (the log file) see the record untouched
            record.levelname, record.msg = levelname, msg


def verbosity_to_level(verbosity: int) -> int:
    """Map verbosity (0=minimal, 1=progress, 2=commands, 3=debug) to a logging level."""
    if verbosity <= 0:
        return logging.WARNING
    if verbosity <= 2:
        return logging.INFO
    return logging.DEBUG


def setup_logger(
    name: str = "xcresult_summary",
    level: Optional[int] = None,
    verbosity: int = 0
) -> logging.Logger:
    """
    Set up logger for xcresult-summary.

    Args:
        name: Logger name
        level: Logging level (overrides verbosity if provided)
        verbosity: Verbosity level (0=minimal, 1=progress, 2=commands, 3=debug)

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    logger.handlers.clear()

    if level is None:
        level = verbosity_to_level(verbosity)
    logger.setLevel(level)

    # stdout carries workflow commands and the rendered report, so logs go to stderr
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logger.level)
    console_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    console_handler.setFormatter(ColoredFormatter(console_format))
    logger.addHandler(console_handler)

    return logger


def get_logger(name: str = "xcresult_summary") -> logging.Logger:
    """Get logger instance."""
    return logging.getLogger(name)
