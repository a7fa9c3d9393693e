"""Data models for the ranking engine."""

from .config import DEFAULT_CONFIG, RankingConfig, resolve_config
from .content import ContentItem, ensure_items, utcnow
from .interaction import (
    RELEVANCE_KINDS,
    Interaction,
    InteractionKind,
    ensure_interactions,
)
from .preferences import PreferenceModel
from .scoring import HomeFeed, RankedFeedEntry, combined_sort_key, quality_sort_key
from .session import FeedSession

__all__ = [
    "DEFAULT_CONFIG",
    "ContentItem",
    "FeedSession",
    "HomeFeed",
    "Interaction",
    "InteractionKind",
    "PreferenceModel",
    "RELEVANCE_KINDS",
    "RankedFeedEntry",
    "RankingConfig",
    "combined_sort_key",
    "ensure_interactions",
    "ensure_items",
    "quality_sort_key",
    "resolve_config",
    "utcnow",
]
