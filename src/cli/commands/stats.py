"""Stats command - word, character, line and paragraph counts for a document."""

import json
import sys
from typing import Optional

from src.cli.commands.input_reader import read_input
from src.cli.config import Config
from src.text_stats import TextStatsAnalyzer


def stats_command(config: Config, input_path: Optional[str] = None, as_json: bool = False) -> int:
    """Print text statistics. Returns the exit status."""
    text = read_input(input_path)
    if text is None:
        return 1

    stats = TextStatsAnalyzer(config.reading_words_per_minute).analyze(text)

    if as_json:
        sys.stdout.write(json.dumps(stats.to_dict(), indent=2) + "\n")
        return 0

    sys.stdout.write(
        f"Characters: {stats.characters:,}\n"
        f"Characters (no spaces): {stats.characters_no_spaces:,}\n"
        f"Words: {stats.words:,}\n"
        f"Lines: {stats.lines}\n"
        f"Paragraphs: {stats.paragraphs}\n"
        f"Reading time: {stats.reading_time_minutes} min\n"
    )
    return 0
