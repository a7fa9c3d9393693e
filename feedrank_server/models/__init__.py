"""Pydantic request/response models for the API."""

from .analysis import ClickbaitRequest, QualityRefreshRequest, QualityRefreshResponse
from .common import FeedEntryCard, FeedResponse, HomeFeedResponse
from .interactions import InteractionAccepted, InteractionRequest
from .sessions import CreateSessionRequest, SessionResponse

__all__ = [
    "ClickbaitRequest",
    "QualityRefreshRequest",
    "QualityRefreshResponse",
    "FeedEntryCard",
    "FeedResponse",
    "HomeFeedResponse",
    "InteractionAccepted",
    "InteractionRequest",
    "CreateSessionRequest",
    "SessionResponse",
]
