"""
Clickbait analysis for poster images.

The analyzer pulls text out of an image through a TextExtractor (OCR lives
outside the engine) and rates it against a fixed phrase taxonomy. A failure
anywhere yields the empty analysis: "no signal" is a valid outcome and never
an error for the caller.
"""

import logging
import re
from typing import Dict, List, Optional, Protocol

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

MAX_CLICKBAIT_SCORE = 5

CLICKBAIT_TERMS: Dict[str, List[str]] = {
    "high_risk": [
        "YOU WON'T BELIEVE",
        "SHOCKING",
        "DOCTORS HATE",
        "ONE WEIRD TRICK",
        "GONE WRONG",
        "GONE SEXUAL",
        "CLICKBAIT",
        "MUST WATCH",
        "INSANE",
        "CRAZY",
        "UNBELIEVABLE",
    ],
    "medium_risk": [
        "AMAZING",
        "INCREDIBLE",
        "MIND-BLOWING",
        "EPIC",
        "ULTIMATE",
        "SECRET",
        "REVEALED",
        "EXPOSED",
        "TRUTH",
        "HIDDEN",
    ],
    "low_risk": ["BEST", "TOP", "WORST", "FIRST TIME", "REACTION", "REVIEW", "TUTORIAL", "HOW TO"],
}

RISK_POINTS: Dict[str, int] = {"high_risk": 3, "medium_risk": 2, "low_risk": 1}


class ClickbaitAnalysis(BaseModel):
    """Result of analyzing one image. clickbait_score is an integer in [0, 5]."""

    clickbait_score: int = 0
    detected_terms: List[str] = Field(default_factory=list)
    extracted_text: str = ""

    @classmethod
    def empty(cls) -> "ClickbaitAnalysis":
        return cls()


class TextExtractor(Protocol):
    """Pulls visible text out of an image (OCR). May raise on any fault."""

    def extract_text(self, image_uri: str) -> str:
        ...


class NullTextExtractor:
    """Extractor used when no OCR backend is configured: sees no text."""

    def extract_text(self, image_uri: str) -> str:
        return ""


def _term_pattern(term: str) -> "re.Pattern[str]":
    # Word boundaries so "TOP" does not fire inside "STOP".
    return re.compile(r"(?<![A-Z0-9])" + re.escape(term) + r"(?![A-Z0-9])")


_PATTERNS = {
    risk: [(term, _term_pattern(term)) for term in terms]
    for risk, terms in CLICKBAIT_TERMS.items()
}


def score_text(text: str) -> ClickbaitAnalysis:
    """Rate text against the taxonomy: 3/2/1 points per high/medium/low phrase, capped at 5."""
    upper = (text or "").upper()
    detected: List[str] = []
    points = 0
    for risk, patterns in _PATTERNS.items():
        for term, pattern in patterns:
            if pattern.search(upper):
                detected.append(term)
                points += RISK_POINTS[risk]
    return ClickbaitAnalysis(
        clickbait_score=min(points, MAX_CLICKBAIT_SCORE),
        detected_terms=detected,
        extracted_text=text or "",
    )


class ClickbaitAnalyzer:
    """analyze(image_uri) -> ClickbaitAnalysis, never raising."""

    def __init__(self, extractor: Optional[TextExtractor] = None):
        self._extractor = extractor or NullTextExtractor()

    def analyze(self, image_uri: str) -> ClickbaitAnalysis:
        if not image_uri:
            return ClickbaitAnalysis.empty()
        try:
            text = self._extractor.extract_text(image_uri)
            return score_text(text)
        except Exception as e:
            logger.warning("[analysis] clickbait analysis failed for %s: %s", image_uri, e)
            return ClickbaitAnalysis.empty()
