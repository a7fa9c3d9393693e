"""
Relevance scorer: viewer-scoped affinity between a viewer and one item.

relevance = 10 * (item tags in preferred tags)
          + 20 if liked + 5 if viewed
          + 0.5 * quality_score
          + 10 if created within the last 168 hours

No upper clamp; the feed ranker only sorts on it. Recomputed on every request
because it depends on the clock and on the viewer's current history.
"""

from datetime import datetime
from typing import AbstractSet, Optional

from ..models.config import DEFAULT_CONFIG, RankingConfig
from ..models.content import ContentItem, utcnow
from ..models.preferences import PreferenceModel


def relevance_score(
    item: ContentItem,
    preferences: PreferenceModel,
    liked_ids: AbstractSet[str],
    viewed_ids: AbstractSet[str],
    config: RankingConfig = DEFAULT_CONFIG,
    now: Optional[datetime] = None,
) -> float:
    """Relevance of item for the viewer described by preferences and history."""
    now = now or utcnow()
    preferred = set(preferences.preferred_tags)

    # Each matching tag counts, including repeats in item.tags.
    score = sum(config.weight_tag_match for tag in item.tags if tag in preferred)
    if item.id in liked_ids:
        score += config.weight_liked
    if item.id in viewed_ids:
        score += config.weight_viewed
    score += item.quality_score * config.quality_factor
    if item.age_hours(now) < config.recency_window_hours:
        score += config.recency_bonus
    return score
