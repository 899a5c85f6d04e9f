"""Logging utilities."""

import logging
import sys
from typing import Optional, TextIO

# Libraries that flood DEBUG output (font cache scans, backend selection)
NOISY_LOGGERS = ("matplotlib", "PIL")


def setup_logging(
    level: int = logging.INFO,
    format_str: Optional[str] = None,
    stream: Optional[TextIO] = None
) -> logging.Logger:
    """
    Setup logging for the code mentor CLI.

    Args:
        level: Logging level (default: INFO)
        format_str: Custom format string
        stream: Output stream (default: stdout)

    Returns:
        Configured package logger
    """
    if format_str is None:
        format_str = "[%(asctime)s] %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(stream or sys.stdout)
        ]
    )

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    logger = logging.getLogger("code_mentor")
    logger.setLevel(level)

    return logger


def get_logger(name: str = "code_mentor") -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)
