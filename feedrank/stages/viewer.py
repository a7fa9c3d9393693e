"""
Viewer context: the preference model and interaction history used for ranking.

Data absence and store failures both resolve to empty defaults, so a viewer
whose state cannot be read is ranked like a viewer with no history.
"""

import logging
from typing import FrozenSet

from pydantic import BaseModel, Field

from ..errors import StoreError
from ..models.interaction import RELEVANCE_KINDS, InteractionKind
from ..models.preferences import PreferenceModel
from ..store import FeedStore

logger = logging.getLogger(__name__)


class ViewerContext(BaseModel):
    """Everything the relevance scorer needs to know about one viewer."""

    user_id: str
    preferences: PreferenceModel = Field(default_factory=PreferenceModel)
    liked_ids: FrozenSet[str] = frozenset()
    viewed_ids: FrozenSet[str] = frozenset()


def load_preferences(store: FeedStore, user_id: str) -> PreferenceModel:
    """Stored preferences, or the empty model when absent or unreadable."""
    try:
        prefs = store.query_preferences(user_id)
    except StoreError as e:
        logger.warning("[feed] preferences lookup failed for user=%r: %s", user_id, e)
        return PreferenceModel()
    return prefs if prefs is not None else PreferenceModel()


def load_viewer_context(store: FeedStore, user_id: str) -> ViewerContext:
    """Preferences plus liked/viewed id sets for user_id."""
    preferences = load_preferences(store, user_id)
    try:
        interactions = store.query_interactions(user_id, RELEVANCE_KINDS)
    except StoreError as e:
        logger.warning("[feed] interaction lookup failed for user=%r: %s", user_id, e)
        interactions = []
    liked = frozenset(i.content_id for i in interactions if i.kind is InteractionKind.LIKE)
    viewed = frozenset(i.content_id for i in interactions if i.kind is InteractionKind.VIEW)
    return ViewerContext(
        user_id=user_id,
        preferences=preferences,
        liked_ids=liked,
        viewed_ids=viewed,
    )
