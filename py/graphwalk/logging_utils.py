"""Logging setup for the command-line and HTTP front ends.

Library modules only call ``logging.getLogger(__name__)``; nothing is
printed until an entry point installs a handler here. Output goes to
stderr so it never mixes with command results on stdout.
"""
import logging
import sys
from typing import Optional

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "WARNING", log_format: Optional[str] = None) -> logging.Logger:
    """Send ``graphwalk.*`` records at ``level`` and above to stderr.

    Calling it again replaces the previous handler instead of stacking a
    second one, so repeated ``main()`` calls log each record once.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(log_format or DEFAULT_FORMAT, "%H:%M:%S"))

    logger = logging.getLogger("graphwalk")
    for old in list(logger.handlers):
        logger.removeHandler(old)
    logger.addHandler(handler)
    logger.setLevel(level.upper())
    logger.propagate = False
    return logger
