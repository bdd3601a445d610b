"""Logging setup for the command line tool."""

import logging
import sys
from typing import Optional, TextIO

# Global flag to track if logging has been set up
_LOGGING_CONFIGURED = False


def setup_logging(level: str = "INFO", stream: Optional[TextIO] = None) -> None:
    """Configure root logging to stderr.

    Log records never share stdout with command output, which may itself
    be a type map. Safe to call more than once; only the first call
    installs a handler.

    :param level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    :type level: str
    :param stream: Stream for log records (default: ``sys.stderr``)
    :type stream: Optional[TextIO]
    """
    global _LOGGING_CONFIGURED

    if _LOGGING_CONFIGURED:
        logging.getLogger(__name__).debug(
            "Logging already configured, skipping duplicate setup"
        )
        return

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        handlers=[handler],
        force=True,
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)

    _LOGGING_CONFIGURED = True
