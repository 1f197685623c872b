"""Logging setup shared by the BSTreeLib application layer.

The tree itself never logs; callers decide what to report.
"""

import logging
import sys
from typing import Optional, TextIO


DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "WARNING",
                  format_string: Optional[str] = None,
                  stream: Optional[TextIO] = None) -> None:
    """Configure the ``bstreelib`` logger hierarchy.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR)
        format_string: Custom format string (uses default if None)
        stream: Destination stream (stderr if None)
    """
    logger = logging.getLogger("bstreelib")
    logger.setLevel(getattr(logging, level.upper()))

    # Replace handlers from a previous call instead of stacking them
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    logger.addHandler(handler)

