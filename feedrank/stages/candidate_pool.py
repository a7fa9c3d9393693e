"""
Candidate pool: bounded, recency-sampled items considered before ranking.

Fetches the most recent items (capped at candidate_window) minus the
exclusion list, then drops items from creators the viewer has muted. A store
failure yields an empty pool, so the feed degrades to "no content".

The public entry points are get_candidate_pool, filter_muted, and fetch_items
(the same degrade-to-empty fetch, used by the named feed views).
"""

import logging
from typing import Iterable, List, Optional, Set

from ..errors import StoreError
from ..models.config import DEFAULT_CONFIG, RankingConfig
from ..models.content import ContentItem
from ..models.preferences import PreferenceModel
from ..store import FeedStore, ItemQuery, OrderBy

logger = logging.getLogger(__name__)


def fetch_items(
    store: FeedStore,
    query: ItemQuery,
    label: str = "items",
) -> List[ContentItem]:
    """Run query_items for a feed view; log and return [] on StoreError."""
    try:
        return list(store.query_items(query))
    except StoreError as e:
        logger.warning("[feed] %s fetch failed: %s", label, e)
        return []


def get_candidate_pool(
    store: FeedStore,
    exclude_ids: Optional[Iterable[str]] = None,
    config: RankingConfig = DEFAULT_CONFIG,
    is_preview: Optional[bool] = None,
) -> List[ContentItem]:
    """
    Most recent items not in exclude_ids, at most config.candidate_window.

    is_preview narrows the pool to previews (True) or published videos (False).
    """
    excluded: Set[str] = set(exclude_ids or ())
    query = ItemQuery(
        is_preview=is_preview,
        exclude_ids=excluded,
        order_by=OrderBy.CREATED_AT,
        limit=config.candidate_window,
    )
    candidates = fetch_items(store, query, "candidate pool")
    # Stores are trusted to honor the query, but a row slipping through must not leak an excluded id.
    return [item for item in candidates if item.id not in excluded]


def filter_muted(
    candidates: List[ContentItem],
    preferences: PreferenceModel,
) -> List[ContentItem]:
    """Drop items whose creator is in the viewer's muted set."""
    if not preferences.muted_channels:
        return list(candidates)
    muted = set(preferences.muted_channels)
    return [item for item in candidates if item.creator_id not in muted]
