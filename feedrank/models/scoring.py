"""
Scoring model: RankedFeedEntry and the ordering key shared by all feeds.

Contains:
- RankedFeedEntry: a content item with its viewer-scoped relevance score
- HomeFeed: the four named views rendered on the home page
- combined_sort_key / quality_sort_key: descending keys with the newer-first,
  id-ascending tie-break
"""

from typing import List, Tuple

from pydantic import BaseModel, Field

from .content import ContentItem


class RankedFeedEntry(BaseModel):
    """A content item plus its relevance score. Ephemeral, never persisted."""

    item: ContentItem
    relevance_score: float

    @property
    def quality_score(self) -> float:
        return self.item.quality_score

    @property
    def combined_score(self) -> float:
        return self.item.quality_score + self.relevance_score


def _tie_break(item: ContentItem) -> Tuple[float, str]:
    return (-item.created_at.timestamp(), item.id)


def combined_sort_key(entry: RankedFeedEntry) -> Tuple[float, float, str]:
    """Ascending sort on this key = combined score descending, newer first, then id."""
    return (-entry.combined_score, *_tie_break(entry.item))


def quality_sort_key(entry: RankedFeedEntry) -> Tuple[float, float, str]:
    """Ascending sort on this key = quality descending, newer first, then id."""
    return (-entry.item.quality_score, *_tie_break(entry.item))


class HomeFeed(BaseModel):
    """All named views for one home-page render."""

    hero: List[RankedFeedEntry] = Field(default_factory=list)
    showcase: List[RankedFeedEntry] = Field(default_factory=list)
    upcoming_previews: List[RankedFeedEntry] = Field(default_factory=list)
    free_for_all: List[RankedFeedEntry] = Field(default_factory=list)
