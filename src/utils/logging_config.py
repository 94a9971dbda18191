"""Simple logging setup - all logs go to stderr so stdout stays clean for converted output."""

import logging
import sys


def setup_logging(verbose: bool = False):
    """Setup logging to stderr. Use ERROR level by default, INFO when verbose."""
    level = logging.INFO if verbose else logging.ERROR
    logging.basicConfig(level=level, format="%(message)s", stream=sys.stderr, force=True)
