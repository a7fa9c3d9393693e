"""Pipeline stages: candidate pool, viewer context, ranking, named feeds, quality refresh."""

from .candidate_pool import fetch_items, filter_muted, get_candidate_pool
from .feeds import (
    free_for_all_feed,
    hero_feed,
    home_feed,
    showcase_feed,
    upcoming_previews_feed,
)
from .orchestrator import rank_feed
from .quality_refresh import compute_item_quality, refresh_quality_score, refresh_quality_scores
from .ranking import as_quality_entries, rank_by_quality, rank_personalized
from .viewer import ViewerContext, load_preferences, load_viewer_context

__all__ = [
    "ViewerContext",
    "as_quality_entries",
    "compute_item_quality",
    "fetch_items",
    "filter_muted",
    "free_for_all_feed",
    "get_candidate_pool",
    "hero_feed",
    "home_feed",
    "load_preferences",
    "load_viewer_context",
    "rank_by_quality",
    "rank_feed",
    "rank_personalized",
    "refresh_quality_score",
    "refresh_quality_scores",
    "showcase_feed",
    "upcoming_previews_feed",
]
