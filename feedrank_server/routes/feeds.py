"""Feed endpoints: home, recommended, showcase, previews, free-for-all."""

from typing import List, Optional, Set, Tuple

from fastapi import APIRouter, Depends, HTTPException, Query

from ..models import FeedResponse, HomeFeedResponse
from ..state import AppState, get_state
from ..utils import MAX_PAGE_SIZE, clamp_limit, to_feed_cards

router = APIRouter()


def _viewer(
    state: AppState,
    user_id: Optional[str],
    session_id: Optional[str],
    exclude: Optional[List[str]],
) -> Tuple[Optional[str], Set[str]]:
    """Resolve the viewer and exclusion set; the session's hidden items are always excluded."""
    excluded = set(exclude or ())
    if not session_id:
        return user_id or None, excluded
    session = state.get_session(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail=f"Session not found: {session_id}")
    return user_id or session.user_id, session.exclusions(excluded)


@router.get("/home", response_model=HomeFeedResponse)
def home(
    user_id: Optional[str] = None,
    session_id: Optional[str] = None,
    exclude: Optional[List[str]] = Query(default=None),
    state: AppState = Depends(get_state),
):
    viewer, excluded = _viewer(state, user_id, session_id, exclude)
    feed = state.engine.home(viewer, excluded)
    return HomeFeedResponse(
        user_id=viewer,
        session_id=session_id,
        hero=to_feed_cards(feed.hero),
        showcase=to_feed_cards(feed.showcase),
        upcoming_previews=to_feed_cards(feed.upcoming_previews),
        free_for_all=to_feed_cards(feed.free_for_all),
    )


@router.get("/recommended", response_model=FeedResponse)
def recommended(
    user_id: Optional[str] = None,
    session_id: Optional[str] = None,
    limit: Optional[int] = Query(default=None, ge=1, le=MAX_PAGE_SIZE),
    exclude: Optional[List[str]] = Query(default=None),
    state: AppState = Depends(get_state),
):
    viewer, excluded = _viewer(state, user_id, session_id, exclude)
    entries = state.engine.rank(viewer, clamp_limit(limit, state.engine.config.recommended_limit), excluded)
    return _feed_response("recommended", viewer, session_id, entries)


@router.get("/showcase", response_model=FeedResponse)
def showcase(
    user_id: Optional[str] = None,
    session_id: Optional[str] = None,
    exclude: Optional[List[str]] = Query(default=None),
    state: AppState = Depends(get_state),
):
    viewer, excluded = _viewer(state, user_id, session_id, exclude)
    return _feed_response("showcase", viewer, session_id, state.engine.showcase(viewer, excluded))


@router.get("/previews", response_model=FeedResponse)
def previews(
    session_id: Optional[str] = None,
    exclude: Optional[List[str]] = Query(default=None),
    state: AppState = Depends(get_state),
):
    viewer, excluded = _viewer(state, None, session_id, exclude)
    return _feed_response("previews", viewer, session_id, state.engine.upcoming_previews(excluded))


@router.get("/free-for-all", response_model=FeedResponse)
def free_for_all(
    user_id: Optional[str] = None,
    session_id: Optional[str] = None,
    limit: Optional[int] = Query(default=None, ge=1, le=MAX_PAGE_SIZE),
    exclude: Optional[List[str]] = Query(default=None),
    state: AppState = Depends(get_state),
):
    viewer, excluded = _viewer(state, user_id, session_id, exclude)
    entries = state.engine.free_for_all(
        viewer, clamp_limit(limit, state.engine.config.free_for_all_limit), excluded
    )
    return _feed_response("free-for-all", viewer, session_id, entries)


def _feed_response(feed: str, user_id, session_id, entries) -> FeedResponse:
    cards = to_feed_cards(entries)
    return FeedResponse(feed=feed, user_id=user_id, session_id=session_id, entries=cards, count=len(cards))
