"""
Feedrank: content ranking and preference engine.

Single entry point for the engine package:
- models/: ContentItem, Interaction, PreferenceModel, RankedFeedEntry, RankingConfig
- scoring/: quality_score (viewer-agnostic), relevance_score (viewer-scoped)
- preferences/: interaction transition rules and the background recorder
- stages/: candidate pool, ranking, named feeds, quality refresh
- analysis/: clickbait signal for poster images
- store: FeedStore protocol the engine reads and writes through
"""

from .analysis import ClickbaitAnalysis, ClickbaitAnalyzer, NullTextExtractor, TextExtractor, score_text
from .engine import FeedEngine
from .errors import FeedrankError, StoreError
from .models import (
    DEFAULT_CONFIG,
    ContentItem,
    FeedSession,
    HomeFeed,
    Interaction,
    InteractionKind,
    PreferenceModel,
    RankedFeedEntry,
    RankingConfig,
)
from .preferences import InteractionRecorder, plan_interaction
from .scoring import quality_score, relevance_score
from .stages import rank_feed
from .store import FeedStore, ItemQuery, OrderBy

__all__ = [
    "DEFAULT_CONFIG",
    "ClickbaitAnalysis",
    "ClickbaitAnalyzer",
    "ContentItem",
    "FeedEngine",
    "FeedSession",
    "FeedStore",
    "FeedrankError",
    "HomeFeed",
    "Interaction",
    "InteractionKind",
    "InteractionRecorder",
    "ItemQuery",
    "NullTextExtractor",
    "OrderBy",
    "PreferenceModel",
    "RankedFeedEntry",
    "RankingConfig",
    "StoreError",
    "TextExtractor",
    "plan_interaction",
    "quality_score",
    "rank_feed",
    "relevance_score",
    "score_text",
]
