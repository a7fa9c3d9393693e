"""Session-related Pydantic models."""

from typing import List, Optional

from pydantic import BaseModel


class CreateSessionRequest(BaseModel):
    user_id: Optional[str] = None


class SessionResponse(BaseModel):
    session_id: str
    user_id: Optional[str] = None
    hidden_ids: List[str] = []
    created_at: str
