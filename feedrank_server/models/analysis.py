"""Analysis and quality refresh Pydantic models."""

from typing import List, Optional

from pydantic import BaseModel


class ClickbaitRequest(BaseModel):
    image_url: str


class QualityRefreshRequest(BaseModel):
    content_ids: Optional[List[str]] = None


class QualityRefreshResponse(BaseModel):
    updated: int
