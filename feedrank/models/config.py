"""
Ranking configuration: quality weights, relevance weights, and feed limits.

RankingConfig defaults are the reference behavior. The server may pass a dict
(e.g. from a JSON file named by FEEDRANK_CONFIG_PATH); from_dict() merges it
with these defaults.
"""

from typing import Dict, Optional

from pydantic import BaseModel, model_validator


class RankingConfig(BaseModel):
    """Configuration for quality scoring, relevance scoring, and feed assembly."""

    # -------------------------------------------------------------------------
    # Quality Score (viewer-agnostic, 0-100)
    # -------------------------------------------------------------------------

    # likes/views ratio is scaled by 100 and capped at this many points.
    engagement_cap: float = 40.0
    # dislikes/views ratio is scaled by 100 and subtracted, capped at this many points.
    dislike_cap: float = 20.0
    # mutes/views ratio is scaled by mute_multiplier and subtracted, capped.
    mute_multiplier: float = 150.0
    mute_cap: float = 30.0
    # Flat bonus when a preview exists for the item.
    preview_bonus: float = 15.0
    # Relevance input contributes at most this many points.
    relevance_cap: float = 25.0
    # Clickbait score (0-5) is doubled and subtracted, capped.
    clickbait_multiplier: float = 2.0
    clickbait_cap: float = 20.0

    # -------------------------------------------------------------------------
    # Relevance Score (viewer-scoped, unbounded)
    # -------------------------------------------------------------------------

    # Points per item tag found in the viewer's preferred tags.
    weight_tag_match: float = 10.0
    # Flat bonus when the viewer liked the item.
    weight_liked: float = 20.0
    # Flat bonus when the viewer viewed the item.
    weight_viewed: float = 5.0
    # Fraction of the item's quality score folded into relevance.
    quality_factor: float = 0.5
    # Flat bonus for items younger than recency_window_hours.
    recency_bonus: float = 10.0
    recency_window_hours: float = 168.0

    # -------------------------------------------------------------------------
    # Feed assembly
    # -------------------------------------------------------------------------

    # Most-recent items fetched before filtering and ranking.
    candidate_window: int = 100
    # Default size of the recommended feed.
    recommended_limit: int = 20
    # Showcase: minimum quality and size.
    showcase_min_quality: float = 70.0
    showcase_limit: int = 10
    # Upcoming previews size.
    previews_limit: int = 5
    # Free-for-all size.
    free_for_all_limit: int = 50
    # Hero slider takes the head of the showcase feed.
    hero_limit: int = 5

    @model_validator(mode="after")
    def limits_are_positive(self):
        for name in (
            "candidate_window",
            "recommended_limit",
            "showcase_limit",
            "previews_limit",
            "free_for_all_limit",
            "hero_limit",
        ):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        return self

    @classmethod
    def from_dict(cls, config_dict: Dict) -> "RankingConfig":
        """Create config from dictionary (e.g., loaded from JSON)."""
        flat = {}
        for section in ("quality", "relevance", "feeds"):
            if section in config_dict and isinstance(config_dict[section], dict):
                flat.update(config_dict[section])
        flat.update({k: v for k, v in config_dict.items() if not isinstance(v, dict)})
        allowed = set(cls.model_fields)
        filtered = {k: v for k, v in flat.items() if k in allowed}
        return cls.model_validate(filtered)


DEFAULT_CONFIG = RankingConfig()


def resolve_config(config: Optional["RankingConfig"]) -> "RankingConfig":
    """Return config or DEFAULT_CONFIG when none is provided."""
    return config if config is not None else DEFAULT_CONFIG
