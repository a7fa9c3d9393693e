"""
Interaction model: one recorded viewer action against a content item.

Interactions are append-only: the engine never deduplicates, mutates, or
deletes them. Built from store rows via Interaction.model_validate(d) or
ensure_interactions().
"""

from datetime import datetime
from enum import Enum
from typing import Dict, List, Union

from pydantic import BaseModel, ConfigDict, Field

from .content import utcnow


class InteractionKind(str, Enum):
    VIEW = "view"
    LIKE = "like"
    DISLIKE = "dislike"
    HIDE = "hide"
    MUTE_CHANNEL = "mute_channel"
    SHOW_MORE_LIKE_THIS = "show_more_like_this"


# Kinds whose history feeds the relevance scorer.
RELEVANCE_KINDS = (
    InteractionKind.LIKE,
    InteractionKind.VIEW,
    InteractionKind.SHOW_MORE_LIKE_THIS,
)


class Interaction(BaseModel):
    """A single viewer action. Immutable once created."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    user_id: str
    content_id: str
    kind: InteractionKind
    timestamp: datetime = Field(default_factory=utcnow)


def ensure_interactions(
    items: List[Union[Dict, "Interaction"]],
) -> List["Interaction"]:
    """Convert list of dicts or Interactions to list of Interaction models."""
    return [
        Interaction.model_validate(i) if isinstance(i, dict) else i
        for i in items
    ]
