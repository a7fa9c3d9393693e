"""
Named feed views built from the ranking primitives.

- showcase: published items with quality >= 70 by quality, limit 10;
  a signed-in viewer gets the personalized ranking instead
- upcoming previews: previews newest first, limit 5, relevance = quality
- free-for-all: personalized ranking for a viewer, otherwise published
  items by quality, limit 50
- hero: head of the showcase feed
"""

from datetime import datetime
from typing import Iterable, List, Optional

from ..models.config import DEFAULT_CONFIG, RankingConfig
from ..models.scoring import HomeFeed, RankedFeedEntry
from ..store import FeedStore, ItemQuery, OrderBy
from .candidate_pool import fetch_items
from .orchestrator import rank_feed
from .ranking import as_quality_entries, rank_by_quality


def showcase_feed(
    store: FeedStore,
    user_id: Optional[str] = None,
    exclude_ids: Optional[Iterable[str]] = None,
    config: RankingConfig = DEFAULT_CONFIG,
    now: Optional[datetime] = None,
) -> List[RankedFeedEntry]:
    """High-quality published items, or the viewer's ranking when signed in."""
    if user_id:
        return rank_feed(store, user_id, config.showcase_limit, exclude_ids, config, now=now)
    query = ItemQuery(
        is_preview=False,
        min_quality=config.showcase_min_quality,
        exclude_ids=set(exclude_ids or ()),
        order_by=OrderBy.QUALITY_SCORE,
        limit=config.showcase_limit,
    )
    items = fetch_items(store, query, "showcase")
    return rank_by_quality(items)[: config.showcase_limit]


def upcoming_previews_feed(
    store: FeedStore,
    exclude_ids: Optional[Iterable[str]] = None,
    config: RankingConfig = DEFAULT_CONFIG,
) -> List[RankedFeedEntry]:
    """Newest previews; no relevance computation."""
    query = ItemQuery(
        is_preview=True,
        exclude_ids=set(exclude_ids or ()),
        order_by=OrderBy.CREATED_AT,
        limit=config.previews_limit,
    )
    items = fetch_items(store, query, "upcoming previews")
    items.sort(key=lambda item: (-item.created_at.timestamp(), item.id))
    return as_quality_entries(items[: config.previews_limit])


def free_for_all_feed(
    store: FeedStore,
    user_id: Optional[str] = None,
    limit: Optional[int] = None,
    exclude_ids: Optional[Iterable[str]] = None,
    config: RankingConfig = DEFAULT_CONFIG,
    now: Optional[datetime] = None,
) -> List[RankedFeedEntry]:
    """Everything feed: personalized for a viewer, by quality otherwise."""
    limit = limit if limit is not None else config.free_for_all_limit
    if user_id:
        return rank_feed(store, user_id, limit, exclude_ids, config, now=now)
    return rank_feed(store, None, limit, exclude_ids, config, is_preview=False)


def hero_feed(
    showcase: List[RankedFeedEntry],
    config: RankingConfig = DEFAULT_CONFIG,
) -> List[RankedFeedEntry]:
    return showcase[: config.hero_limit]


def home_feed(
    store: FeedStore,
    user_id: Optional[str] = None,
    exclude_ids: Optional[Iterable[str]] = None,
    config: RankingConfig = DEFAULT_CONFIG,
    now: Optional[datetime] = None,
) -> HomeFeed:
    """All four home-page views for one render."""
    excluded = set(exclude_ids or ())
    showcase = showcase_feed(store, user_id, excluded, config, now=now)
    return HomeFeed(
        hero=hero_feed(showcase, config),
        showcase=showcase,
        upcoming_previews=upcoming_previews_feed(store, excluded, config),
        free_for_all=free_for_all_feed(store, user_id, None, excluded, config, now=now),
    )
