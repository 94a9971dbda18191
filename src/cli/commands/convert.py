"""Convert command - runs one of the four conversions on a file or stdin."""

import logging
import sys
from pathlib import Path
from typing import Optional

from src.cli.commands.input_reader import read_input
from src.cli.config import Config
from src.conversion import ConversionService

logger = logging.getLogger(__name__)


def convert_command(
    config: Config,
    kind: str,
    input_path: Optional[str] = None,
    output_path: Optional[str] = None,
    extract_frontmatter: bool = False,
) -> int:
    """Convert input text and print or save the result. Returns the exit status."""
    text = read_input(input_path)
    if text is None:
        return 1

    service = ConversionService(extract_frontmatter=extract_frontmatter or config.extract_frontmatter)
    result = service.convert_result(kind, text)

    if not result.success:
        logger.error(f"❌ {result.output}")
        return 1

    if output_path:
        try:
            Path(output_path).write_text(result.output, encoding="utf-8")
        except OSError as e:
            logger.error(f"❌ Could not write {output_path}: {e}")
            return 1
        logger.info(f"✅ Wrote {kind} result to {output_path}")
    else:
        sys.stdout.write(result.output)
        if not result.output.endswith("\n"):
            sys.stdout.write("\n")

    return 0
