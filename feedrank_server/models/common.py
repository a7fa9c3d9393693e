"""Common Pydantic models shared across routes."""

from typing import List, Optional

from pydantic import BaseModel


class FeedEntryCard(BaseModel):
    id: str
    title: str
    description: Optional[str] = None
    video_url: Optional[str] = None
    poster_url: Optional[str] = None
    creator_id: Optional[str] = None
    tags: List[str] = []
    is_preview: bool = False
    created_at: str
    quality_score: float
    relevance_score: float
    combined_score: float
    position: int


class FeedResponse(BaseModel):
    feed: str
    user_id: Optional[str] = None
    session_id: Optional[str] = None
    entries: List[FeedEntryCard] = []
    count: int = 0


class HomeFeedResponse(BaseModel):
    user_id: Optional[str] = None
    session_id: Optional[str] = None
    hero: List[FeedEntryCard] = []
    showcase: List[FeedEntryCard] = []
    upcoming_previews: List[FeedEntryCard] = []
    free_for_all: List[FeedEntryCard] = []
