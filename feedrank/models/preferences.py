"""
PreferenceModel: a viewer's accumulated preferred tags and muted creators.

Both collections only grow. They are kept as ordered, duplicate-free lists so
they survive a round trip through JSON and document stores unchanged.
"""

from typing import Iterable, List

from pydantic import BaseModel, Field, field_validator


def _union(existing: List[str], additions: Iterable[str]) -> List[str]:
    """Append additions not already present, preserving first-insertion order."""
    out = list(existing)
    seen = set(out)
    for value in additions:
        if value not in seen:
            out.append(value)
            seen.add(value)
    return out


class PreferenceModel(BaseModel):
    """Per-viewer preference state. Missing state is the empty model."""

    preferred_tags: List[str] = Field(default_factory=list)
    muted_channels: List[str] = Field(default_factory=list)

    @field_validator("preferred_tags", "muted_channels", mode="before")
    @classmethod
    def _dedupe(cls, value):
        if value is None:
            return []
        return _union([], value)

    def prefers(self, tag: str) -> bool:
        return tag in self.preferred_tags

    def is_muted(self, creator_id: str) -> bool:
        return creator_id in self.muted_channels

    def with_tags(self, tags: Iterable[str]) -> "PreferenceModel":
        """Copy with tags merged into preferred_tags (set union)."""
        return self.model_copy(update={"preferred_tags": _union(self.preferred_tags, tags)})

    def with_muted(self, creator_id: str) -> "PreferenceModel":
        """Copy with creator_id merged into muted_channels (set union)."""
        return self.model_copy(update={"muted_channels": _union(self.muted_channels, [creator_id])})
