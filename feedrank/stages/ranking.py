"""
Feed ranking: attach relevance and sort.

Personalized: relevance from the viewer context, sorted by
quality_score + relevance_score descending.
Unpersonalized: relevance_score = quality_score, sorted by quality descending.
Ties order newer items first, then by id, so the output is deterministic.
"""

from datetime import datetime
from typing import List, Optional

from ..models.config import DEFAULT_CONFIG, RankingConfig
from ..models.content import ContentItem, utcnow
from ..models.scoring import RankedFeedEntry, combined_sort_key, quality_sort_key
from ..scoring.relevance import relevance_score
from .viewer import ViewerContext


def rank_personalized(
    candidates: List[ContentItem],
    viewer: ViewerContext,
    config: RankingConfig = DEFAULT_CONFIG,
    now: Optional[datetime] = None,
) -> List[RankedFeedEntry]:
    """Score each candidate for viewer and sort by combined score."""
    # One clock reading per request so every item sees the same "now".
    now = now or utcnow()
    entries = [
        RankedFeedEntry(
            item=item,
            relevance_score=relevance_score(
                item,
                viewer.preferences,
                viewer.liked_ids,
                viewer.viewed_ids,
                config,
                now=now,
            ),
        )
        for item in candidates
    ]
    entries.sort(key=combined_sort_key)
    return entries


def as_quality_entries(items: List[ContentItem]) -> List[RankedFeedEntry]:
    """Wrap items with relevance_score = quality_score, keeping their order."""
    return [RankedFeedEntry(item=item, relevance_score=item.quality_score) for item in items]


def rank_by_quality(candidates: List[ContentItem]) -> List[RankedFeedEntry]:
    """Unpersonalized ordering: quality descending."""
    entries = as_quality_entries(candidates)
    entries.sort(key=quality_sort_key)
    return entries
