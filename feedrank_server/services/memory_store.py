"""
In-memory feed store.

Dict-backed FeedStore used for tests, local runs, and as the base of the
JSON file store. Each operation is atomic under one lock; sequences of
operations (e.g. read-modify-write of preferences) are not.
"""

import threading
from contextlib import contextmanager
from typing import Dict, Iterable, List, Optional

from feedrank.errors import StoreError
from feedrank.models.content import ContentItem
from feedrank.models.interaction import Interaction, InteractionKind
from feedrank.models.preferences import PreferenceModel
from feedrank.store import COUNTER_FIELDS, ItemQuery, OrderBy


def _order_key(order_by: OrderBy):
    if order_by is OrderBy.QUALITY_SCORE:
        return lambda item: (-item.quality_score, -item.created_at.timestamp(), item.id)
    return lambda item: (-item.created_at.timestamp(), item.id)


class InMemoryFeedStore:
    """FeedStore held in process memory."""

    def __init__(
        self,
        items: Optional[Iterable[ContentItem]] = None,
        preferences: Optional[Dict[str, PreferenceModel]] = None,
        interactions: Optional[Iterable[Interaction]] = None,
    ):
        self._lock = threading.RLock()
        self._items: Dict[str, ContentItem] = {}
        self._preferences: Dict[str, PreferenceModel] = dict(preferences or {})
        self._interactions: List[Interaction] = list(interactions or [])
        for item in items or []:
            self._items[item.id] = item

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def query_items(self, query: ItemQuery) -> List[ContentItem]:
        with self._lock:
            matches = [item for item in self._items.values() if query.matches(item)]
        matches.sort(key=_order_key(query.order_by))
        return matches[: query.limit]

    def get_item(self, content_id: str) -> Optional[ContentItem]:
        with self._lock:
            return self._items.get(content_id)

    def query_preferences(self, user_id: str) -> Optional[PreferenceModel]:
        with self._lock:
            prefs = self._preferences.get(user_id)
            return prefs.model_copy(deep=True) if prefs is not None else None

    def query_interactions(
        self,
        user_id: str,
        kinds: Iterable[InteractionKind],
    ) -> List[Interaction]:
        wanted = {InteractionKind(k) for k in kinds}
        with self._lock:
            return [i for i in self._interactions if i.user_id == user_id and i.kind in wanted]

    def count_interactions(self, content_id: str, kind: InteractionKind) -> int:
        kind = InteractionKind(kind)
        with self._lock:
            return sum(1 for i in self._interactions if i.content_id == content_id and i.kind is kind)

    def has_preview(self, content_id: str) -> bool:
        with self._lock:
            return any(item.is_preview and item.preview_of == content_id for item in self._items.values())

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    @contextmanager
    def _write(self):
        """Apply one write under the lock; restore the prior state if persisting it fails."""
        with self._lock:
            items = dict(self._items)
            preferences = dict(self._preferences)
            interactions = list(self._interactions)
            try:
                yield
                self._after_write()
            except StoreError:
                self._items = items
                self._preferences = preferences
                self._interactions = interactions
                raise

    def upsert_preferences(
        self,
        user_id: str,
        preferred_tags: Optional[List[str]] = None,
        muted_channels: Optional[List[str]] = None,
    ) -> None:
        with self._write():
            current = self._preferences.get(user_id) or PreferenceModel()
            update = {}
            if preferred_tags is not None:
                update["preferred_tags"] = list(preferred_tags)
            if muted_channels is not None:
                update["muted_channels"] = list(muted_channels)
            self._preferences[user_id] = PreferenceModel.model_validate(current.model_dump() | update)

    def increment_counter(self, content_id: str, field: str, delta: int = 1) -> None:
        if field not in COUNTER_FIELDS:
            raise StoreError(f"Unknown counter field: {field}")
        with self._write():
            item = self._items.get(content_id)
            if item is None:
                raise StoreError(f"Content not found: {content_id}")
            self._items[content_id] = item.model_copy(update={field: getattr(item, field) + delta})

    def insert_interaction(self, interaction: Interaction) -> None:
        with self._write():
            self._interactions.append(interaction)

    def update_quality_score(self, content_id: str, score: float) -> None:
        with self._write():
            item = self._items.get(content_id)
            if item is None:
                raise StoreError(f"Content not found: {content_id}")
            clamped = max(0.0, min(100.0, float(score)))
            self._items[content_id] = item.model_copy(update={"quality_score": clamped})

    def add_item(self, item: ContentItem) -> None:
        with self._write():
            self._items[item.id] = item

    def ping(self) -> bool:
        return True

    def _after_write(self) -> None:
        """Hook for persistent subclasses; called with the lock held. Raise StoreError to roll back."""
