"""
Quality refresh: recompute stored quality scores from live signals.

quality_score is derived and may drift from the counters; this job rebuilds it
from views/likes/dislikes, the number of mute_channel interactions against
the item, whether a preview exists, and the poster's clickbait score. The
relevance input is 0 because the stored score is viewer-agnostic.
"""

import logging
from typing import Iterable, Optional

from ..analysis.clickbait import ClickbaitAnalyzer
from ..errors import StoreError
from ..models.config import DEFAULT_CONFIG, RankingConfig
from ..models.content import ContentItem
from ..models.interaction import InteractionKind
from ..scoring.quality import quality_score
from ..store import FeedStore, ItemQuery, OrderBy
from .candidate_pool import fetch_items

logger = logging.getLogger(__name__)


def compute_item_quality(
    store: FeedStore,
    item: ContentItem,
    analyzer: Optional[ClickbaitAnalyzer] = None,
    config: RankingConfig = DEFAULT_CONFIG,
) -> float:
    """Quality score for item from live store data. Raises StoreError on store failure."""
    muted_count = store.count_interactions(item.id, InteractionKind.MUTE_CHANNEL)
    has_preview = store.has_preview(item.id)
    clickbait = analyzer.analyze(item.poster_url).clickbait_score if analyzer else 0
    return quality_score(
        views=item.views,
        likes=item.likes,
        dislikes=item.dislikes,
        muted_count=muted_count,
        has_preview=has_preview,
        clickbait_score=clickbait,
        relevance_score=0.0,
        config=config,
    )


def refresh_quality_score(
    store: FeedStore,
    item: ContentItem,
    analyzer: Optional[ClickbaitAnalyzer] = None,
    config: RankingConfig = DEFAULT_CONFIG,
) -> float:
    """Recompute and persist item's quality score; returns the new score."""
    score = compute_item_quality(store, item, analyzer, config)
    store.update_quality_score(item.id, score)
    return score


def refresh_quality_scores(
    store: FeedStore,
    content_ids: Optional[Iterable[str]] = None,
    analyzer: Optional[ClickbaitAnalyzer] = None,
    config: RankingConfig = DEFAULT_CONFIG,
) -> int:
    """
    Refresh the given items, or the current candidate window when content_ids is None.

    Failures are logged per item and skipped. Returns the number of items updated.
    """
    if content_ids is None:
        query = ItemQuery(order_by=OrderBy.CREATED_AT, limit=config.candidate_window)
        items = fetch_items(store, query, "quality refresh")
    else:
        items = []
        for content_id in content_ids:
            try:
                item = store.get_item(content_id)
            except StoreError as e:
                logger.warning("[quality] lookup failed for %s: %s", content_id, e)
                continue
            if item is None:
                logger.warning("[quality] unknown content id %s", content_id)
                continue
            items.append(item)

    updated = 0
    for item in items:
        try:
            refresh_quality_score(store, item, analyzer, config)
            updated += 1
        except StoreError as e:
            logger.warning("[quality] refresh failed for %s: %s", item.id, e)
    logger.info("[quality] refreshed %d of %d items", updated, len(items))
    return updated
