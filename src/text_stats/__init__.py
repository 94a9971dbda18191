"""Text statistics (word counts, reading time) for markdown documents."""

from .analyzer import DEFAULT_WORDS_PER_MINUTE, TextStats, TextStatsAnalyzer, text_stats

__all__ = [
    "DEFAULT_WORDS_PER_MINUTE",
    "TextStats",
    "TextStatsAnalyzer",
    "text_stats",
]
