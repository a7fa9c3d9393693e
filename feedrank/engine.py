"""
Feed engine: facade the presentation layer calls once per feed render.

Holds the injected store, config, analyzer, and interaction recorder; every
feed method delegates to the stage functions in stages/. Nothing here keeps
per-request state, so one engine serves concurrent requests.
"""

import logging
from concurrent.futures import Future
from datetime import datetime
from typing import Iterable, List, Optional, Union

from .analysis.clickbait import ClickbaitAnalysis, ClickbaitAnalyzer
from .errors import StoreError
from .models.config import RankingConfig, resolve_config
from .models.content import ContentItem
from .models.interaction import InteractionKind
from .models.scoring import HomeFeed, RankedFeedEntry
from .preferences.recorder import FailureCallback, InteractionRecorder
from .stages.feeds import free_for_all_feed, home_feed, showcase_feed, upcoming_previews_feed
from .stages.orchestrator import rank_feed
from .stages.quality_refresh import refresh_quality_scores
from .store import FeedStore

logger = logging.getLogger(__name__)


class FeedEngine:
    """Ranking and preference engine bound to one store."""

    def __init__(
        self,
        store: FeedStore,
        config: Optional[RankingConfig] = None,
        analyzer: Optional[ClickbaitAnalyzer] = None,
        max_workers: int = 4,
        on_failure: Optional[FailureCallback] = None,
    ):
        self.store = store
        self.config = resolve_config(config)
        self.analyzer = analyzer or ClickbaitAnalyzer()
        self.recorder = InteractionRecorder(store, max_workers=max_workers, on_failure=on_failure)

    # ------------------------------------------------------------------
    # Feeds
    # ------------------------------------------------------------------

    def rank(
        self,
        user_id: Optional[str] = None,
        limit: Optional[int] = None,
        exclude_ids: Optional[Iterable[str]] = None,
        now: Optional[datetime] = None,
    ) -> List[RankedFeedEntry]:
        """Recommended feed. Personalized when user_id is set; [] when the store fails."""
        limit = limit if limit is not None else self.config.recommended_limit
        return rank_feed(self.store, user_id, limit, exclude_ids, self.config, now=now)

    def showcase(
        self,
        user_id: Optional[str] = None,
        exclude_ids: Optional[Iterable[str]] = None,
        now: Optional[datetime] = None,
    ) -> List[RankedFeedEntry]:
        return showcase_feed(self.store, user_id, exclude_ids, self.config, now=now)

    def upcoming_previews(
        self,
        exclude_ids: Optional[Iterable[str]] = None,
    ) -> List[RankedFeedEntry]:
        return upcoming_previews_feed(self.store, exclude_ids, self.config)

    def free_for_all(
        self,
        user_id: Optional[str] = None,
        limit: Optional[int] = None,
        exclude_ids: Optional[Iterable[str]] = None,
        now: Optional[datetime] = None,
    ) -> List[RankedFeedEntry]:
        return free_for_all_feed(self.store, user_id, limit, exclude_ids, self.config, now=now)

    def home(
        self,
        user_id: Optional[str] = None,
        exclude_ids: Optional[Iterable[str]] = None,
        now: Optional[datetime] = None,
    ) -> HomeFeed:
        return home_feed(self.store, user_id, exclude_ids, self.config, now=now)

    # ------------------------------------------------------------------
    # Interactions
    # ------------------------------------------------------------------

    def resolve_item(self, content_id: str) -> Optional[ContentItem]:
        """Look up one item; None when unknown or when the store fails."""
        try:
            return self.store.get_item(content_id)
        except StoreError as e:
            logger.warning("[feed] item lookup failed for %s: %s", content_id, e)
            return None

    def record_interaction(
        self,
        user_id: str,
        item: Union[ContentItem, str],
        kind: Union[InteractionKind, str],
    ) -> Optional["Future[bool]"]:
        """
        Record one viewer action without blocking.

        item may be a ContentItem or its id. Returns the background future, or
        None when the item id cannot be resolved.
        """
        if isinstance(item, str):
            resolved = self.resolve_item(item)
            if resolved is None:
                return None
            item = resolved
        return self.recorder.record(user_id, item, InteractionKind(kind))

    # ------------------------------------------------------------------
    # Quality and analysis
    # ------------------------------------------------------------------

    def analyze(self, image_uri: str) -> ClickbaitAnalysis:
        return self.analyzer.analyze(image_uri)

    def refresh_quality(self, content_ids: Optional[Iterable[str]] = None) -> int:
        """Recompute stored quality scores; returns the number updated."""
        return refresh_quality_scores(self.store, content_ids, self.analyzer, self.config)

    def shutdown(self, wait: bool = True) -> None:
        self.recorder.shutdown(wait=wait)
