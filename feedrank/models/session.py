"""
Session model: viewer-local state for one browsing session.
"""

from datetime import datetime
from typing import Optional, Set

from pydantic import BaseModel, Field

from .content import utcnow


class FeedSession(BaseModel):
    """Items hidden during a session are excluded from its later feed renders."""

    session_id: str
    user_id: Optional[str] = None
    hidden_ids: Set[str] = Field(default_factory=set)
    created_at: datetime = Field(default_factory=utcnow)

    def hide(self, content_id: str) -> None:
        self.hidden_ids.add(content_id)

    def exclusions(self, extra: Optional[Set[str]] = None) -> Set[str]:
        """Hidden ids merged with any per-request exclusions."""
        return set(self.hidden_ids) | set(extra or ())
