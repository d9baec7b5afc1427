"""
Logging setup - Root logger configuration for the service process.

Modules log through logging.getLogger(__name__); this installs the single
stdout handler they all propagate to.
"""

import logging
import sys
import time

from pythonjsonlogger.json import JsonFormatter

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


class UTCJsonFormatter(JsonFormatter):
    """JSON formatter with UTC timestamps."""

    converter = time.gmtime


def configure_logging(level: str = "INFO", json_output: bool = True) -> None:
    """
    Replace root handlers with one stdout handler.

    Args:
        level: Log level name (case-insensitive)
        json_output: Emit JSON lines instead of plain text
    """
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level.upper())

    handler = logging.StreamHandler(sys.stdout)
    if json_output:
        handler.setFormatter(UTCJsonFormatter(LOG_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
