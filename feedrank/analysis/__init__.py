"""Content analysis: clickbait signal consumed by the quality scorer."""

from .clickbait import (
    CLICKBAIT_TERMS,
    MAX_CLICKBAIT_SCORE,
    ClickbaitAnalysis,
    ClickbaitAnalyzer,
    NullTextExtractor,
    TextExtractor,
    score_text,
)

__all__ = [
    "CLICKBAIT_TERMS",
    "MAX_CLICKBAIT_SCORE",
    "ClickbaitAnalysis",
    "ClickbaitAnalyzer",
    "NullTextExtractor",
    "TextExtractor",
    "score_text",
]
