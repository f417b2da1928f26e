"""
Logging setup shared by the CLI and the library modules.
"""

import logging
import sys
from typing import Optional, TextIO

PACKAGE_LOGGER = "vector_db"


def configure_logging(level: str = "INFO", stream: Optional[TextIO] = None) -> None:
    """
    Route log records to stderr so they never mix with CLI results on stdout.
    """
    numeric_level: int = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        stream=stream or sys.stderr,
    )
    logging.getLogger(PACKAGE_LOGGER).setLevel(numeric_level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(name or PACKAGE_LOGGER)
