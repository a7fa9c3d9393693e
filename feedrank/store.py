"""
Feed Store abstraction.

Query interface over the external data store that owns content items,
interactions, and persisted preference models. Implementations live in
feedrank_server.services: in-memory (tests, local), JSON file (local dev),
Firestore (production). The engine receives one instance by injection.

Every method either returns its result or raises StoreError.
"""

from enum import Enum
from typing import Iterable, List, Optional, Protocol, Set

from pydantic import BaseModel, Field

from .models.content import ContentItem
from .models.interaction import Interaction, InteractionKind
from .models.preferences import PreferenceModel

COUNTER_FIELDS = ("views", "likes", "dislikes")


class OrderBy(str, Enum):
    CREATED_AT = "created_at"
    QUALITY_SCORE = "quality_score"


class ItemQuery(BaseModel):
    """Filter, order (always descending), and limit for query_items."""

    is_preview: Optional[bool] = None
    min_quality: Optional[float] = None
    exclude_ids: Set[str] = Field(default_factory=set)
    order_by: OrderBy = OrderBy.CREATED_AT
    limit: int = 100

    def matches(self, item: ContentItem) -> bool:
        """True if item passes every filter predicate (used by local stores)."""
        if self.is_preview is not None and item.is_preview != self.is_preview:
            return False
        if self.min_quality is not None and item.quality_score < self.min_quality:
            return False
        if item.id in self.exclude_ids:
            return False
        return True


class FeedStore(Protocol):
    """Protocol for content, interaction, and preference persistence."""

    def query_items(self, query: ItemQuery) -> List[ContentItem]:
        """Return items passing the query filters, ordered descending, at most query.limit."""
        ...

    def get_item(self, content_id: str) -> Optional[ContentItem]:
        """Return one item by id, or None."""
        ...

    def query_preferences(self, user_id: str) -> Optional[PreferenceModel]:
        """Return stored preferences, or None when the viewer has none yet."""
        ...

    def query_interactions(
        self,
        user_id: str,
        kinds: Iterable[InteractionKind],
    ) -> List[Interaction]:
        """Return the viewer's interactions of the given kinds."""
        ...

    def upsert_preferences(
        self,
        user_id: str,
        preferred_tags: Optional[List[str]] = None,
        muted_channels: Optional[List[str]] = None,
    ) -> None:
        """Merge-write preferences; a None field is left untouched. Last write wins."""
        ...

    def increment_counter(self, content_id: str, field: str, delta: int = 1) -> None:
        """Add delta to one of views/likes/dislikes."""
        ...

    def insert_interaction(self, interaction: Interaction) -> None:
        """Append one interaction to the log."""
        ...

    def count_interactions(self, content_id: str, kind: InteractionKind) -> int:
        """Number of interactions of kind recorded against content_id."""
        ...

    def has_preview(self, content_id: str) -> bool:
        """True if some preview item has preview_of == content_id."""
        ...

    def update_quality_score(self, content_id: str, score: float) -> None:
        """Persist a recomputed quality score."""
        ...

    def add_item(self, item: ContentItem) -> None:
        """Insert or replace one item (seeding)."""
        ...
