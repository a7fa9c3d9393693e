"""
ContentItem model: typed representation of one published video.

Used by the scorers, the candidate pool, and the feed views instead of raw
store rows. Built from store dicts via ContentItem.model_validate(d) or
ensure_items().
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ContentItem(BaseModel):
    """
    A video as the ranking engine sees it.

    Counters are trusted to be non-negative. quality_score is derived and may
    lag behind the live counters; it is clamped to [0, 100] on validation.
    """

    model_config = ConfigDict(extra="ignore")

    id: str
    title: str = ""
    description: str = ""
    video_url: str = ""
    poster_url: str = ""
    creator_id: str = ""
    tags: List[str] = Field(default_factory=list)
    views: int = 0
    likes: int = 0
    dislikes: int = 0
    duration: float = 0.0
    is_preview: bool = False
    preview_of: Optional[str] = None
    quality_score: float = 0.0
    created_at: datetime = Field(default_factory=utcnow)

    @field_validator("tags", mode="before")
    @classmethod
    def _tags_not_null(cls, value: Any) -> Any:
        return value if value is not None else []

    @field_validator("views", "likes", "dislikes", mode="before")
    @classmethod
    def _counters_not_null(cls, value: Any) -> Any:
        return value if value is not None else 0

    @field_validator("quality_score", mode="before")
    @classmethod
    def _clamp_quality(cls, value: Any) -> float:
        if value is None:
            return 0.0
        return max(0.0, min(100.0, float(value)))

    @field_validator("created_at", mode="after")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    def age_hours(self, now: Optional[datetime] = None) -> float:
        """Hours elapsed since creation (negative if created_at is in the future)."""
        now = now or utcnow()
        return (now - self.created_at).total_seconds() / 3600


def ensure_items(items: List[Union[Dict[str, Any], "ContentItem"]]) -> List["ContentItem"]:
    """Convert list of dicts or ContentItems to list of ContentItem models."""
    return [
        ContentItem.model_validate(i) if isinstance(i, dict) else i
        for i in items
    ]
