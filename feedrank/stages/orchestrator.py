"""
Pipeline orchestrator: candidate pool, mute filter, ranking, truncation.

The main entry point is rank_feed. Authenticated requests are personalized;
anonymous requests skip the viewer context entirely and are ordered by
quality alone.
"""

import logging
from datetime import datetime
from typing import Iterable, List, Optional

from ..models.config import DEFAULT_CONFIG, RankingConfig
from ..models.scoring import RankedFeedEntry
from ..store import FeedStore
from .candidate_pool import filter_muted, get_candidate_pool
from .ranking import rank_by_quality, rank_personalized
from .viewer import load_viewer_context

logger = logging.getLogger(__name__)


def rank_feed(
    store: FeedStore,
    user_id: Optional[str],
    limit: int,
    exclude_ids: Optional[Iterable[str]] = None,
    config: RankingConfig = DEFAULT_CONFIG,
    now: Optional[datetime] = None,
    is_preview: Optional[bool] = None,
) -> List[RankedFeedEntry]:
    """
    Ranked feed for user_id (or an anonymous viewer when user_id is None).

    Steps: fetch the recency window minus exclude_ids; for a viewer, drop muted
    creators and sort by quality + relevance; anonymously, sort by quality with
    relevance_score = quality_score. Truncate to limit. Never raises on store
    failures: an unreadable pool gives [].
    """
    if limit <= 0:
        return []

    # 1) Candidate pool (recency window, exclusions)
    candidates = get_candidate_pool(store, exclude_ids, config, is_preview=is_preview)
    if not candidates:
        return []

    # 2) Anonymous: unpersonalized path, no mute filter
    if not user_id:
        return rank_by_quality(candidates)[:limit]

    # 3) Viewer context, mute filter, relevance
    viewer = load_viewer_context(store, user_id)
    visible = filter_muted(candidates, viewer.preferences)
    ranked = rank_personalized(visible, viewer, config, now=now)
    logger.debug(
        "[feed] ranked user=%r candidates=%d visible=%d returned=%d",
        user_id, len(candidates), len(visible), min(limit, len(ranked)),
    )

    # 4) Truncate
    return ranked[:limit]
