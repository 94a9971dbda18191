"""Input helpers shared by the CLI commands."""

import logging
import sys
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


def read_input(input_path: Optional[str] = None) -> Optional[str]:
    """Read text from a file, or from stdin when no path (or "-") is given.

    Returns None (after logging the reason) when the file cannot be read.
    """
    if not input_path or input_path == "-":
        return sys.stdin.read()

    path = Path(input_path)
    if not path.is_file():
        logger.error(f"❌ File not found: {path}")
        return None

    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        logger.error(f"❌ Unable to read file as UTF-8: {e}")
        return None
    except OSError as e:
        logger.error(f"❌ Error reading file {path}: {e}")
        return None
