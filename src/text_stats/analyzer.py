"""Text statistics for raw markdown text."""

import math
import re
from dataclasses import dataclass
from typing import Dict

DEFAULT_WORDS_PER_MINUTE = 200

_PARAGRAPH_BREAK = re.compile(r"\n\s*\n")
_WHITESPACE = re.compile(r"\s")


@dataclass
class TextStats:
    """Counts computed from a piece of text."""

    words: int
    characters: int
    characters_no_spaces: int
    lines: int
    paragraphs: int
    reading_time_minutes: int

    def to_dict(self) -> Dict[str, int]:
        """Return the stats using the camelCase keys the UI consumes."""
        return {
            "words": self.words,
            "characters": self.characters,
            "charactersNoSpaces": self.characters_no_spaces,
            "lines": self.lines,
            "paragraphs": self.paragraphs,
            "readingTimeMinutes": self.reading_time_minutes,
        }


class TextStatsAnalyzer:
    """Computes word, character, line and paragraph counts plus reading time."""

    def __init__(self, words_per_minute: int = DEFAULT_WORDS_PER_MINUTE):
        if words_per_minute <= 0:
            raise ValueError(f"words_per_minute must be positive, got {words_per_minute}")
        self.words_per_minute = words_per_minute

    def analyze(self, text: str) -> TextStats:
        """
        Analyze text and return its statistics.

        Args:
            text: Raw text (usually the markdown source)

        Returns:
            TextStats for the given text
        """
        words = len(text.split())
        paragraphs = [block for block in _PARAGRAPH_BREAK.split(text) if block.strip()]

        return TextStats(
            words=words,
            characters=len(text),
            characters_no_spaces=len(_WHITESPACE.sub("", text)),
            # An empty trailing segment still counts as a line
            lines=text.count("\n") + 1,
            paragraphs=len(paragraphs),
            reading_time_minutes=self.reading_time(words),
        )

    def reading_time(self, words: int) -> int:
        """Estimated reading time in whole minutes, 0 for no words."""
        if words <= 0:
            return 0
        return math.ceil(words / self.words_per_minute)


def text_stats(text: str, words_per_minute: int = DEFAULT_WORDS_PER_MINUTE) -> TextStats:
    """Compute statistics for text."""
    return TextStatsAnalyzer(words_per_minute).analyze(text)
