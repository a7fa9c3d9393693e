"""Interaction Pydantic models."""

from typing import Optional

from pydantic import BaseModel

from feedrank.models.interaction import InteractionKind


class InteractionRequest(BaseModel):
    user_id: str
    content_id: str
    kind: InteractionKind
    session_id: Optional[str] = None


class InteractionAccepted(BaseModel):
    status: str = "accepted"
    content_id: str
    kind: InteractionKind
    hidden: bool = False
