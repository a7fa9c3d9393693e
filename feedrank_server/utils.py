"""Pure helpers: feed card formatting and page limits."""

from typing import List, Optional

from feedrank import FeedSession, RankedFeedEntry

from .models import FeedEntryCard, SessionResponse

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


def to_feed_card(entry: RankedFeedEntry, position: int) -> FeedEntryCard:
    item = entry.item
    return FeedEntryCard(
        id=item.id,
        title=item.title,
        description=item.description,
        video_url=item.video_url,
        poster_url=item.poster_url,
        creator_id=item.creator_id,
        tags=list(item.tags),
        is_preview=item.is_preview,
        created_at=item.created_at.isoformat(),
        quality_score=round(item.quality_score, 4),
        relevance_score=round(entry.relevance_score, 4),
        combined_score=round(entry.combined_score, 4),
        position=position,
    )


def to_feed_cards(entries: List[RankedFeedEntry]) -> List[FeedEntryCard]:
    return [to_feed_card(entry, i + 1) for i, entry in enumerate(entries)]


def clamp_limit(limit: Optional[int], default: int = DEFAULT_PAGE_SIZE) -> int:
    """Requested page size bounded to [1, MAX_PAGE_SIZE]."""
    if limit is None:
        return default
    return max(1, min(MAX_PAGE_SIZE, limit))


def to_session_response(session: FeedSession) -> SessionResponse:
    return SessionResponse(
        session_id=session.session_id,
        user_id=session.user_id,
        hidden_ids=sorted(session.hidden_ids),
        created_at=session.created_at.isoformat(),
    )
