"""
Quality scorer: viewer-agnostic 0-100 health metric for a content item.

Fixed weights, no learned parameters:
- likes/views adds up to 40 points
- dislikes/views subtracts up to 20, mutes/views (x1.5) subtracts up to 30
- a preview adds a flat 15
- the relevance input adds up to 25
- the clickbait signal (x2) subtracts up to 20
The result is clamped to [0, 100]. Every ratio divides by max(views, 1).
"""

from ..models.config import DEFAULT_CONFIG, RankingConfig


def _clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return max(low, min(high, value))


def quality_score(
    views: int,
    likes: int,
    dislikes: int,
    muted_count: int,
    has_preview: bool,
    clickbait_score: float,
    relevance_score: float,
    config: RankingConfig = DEFAULT_CONFIG,
) -> float:
    """Quality score in [0, 100]. Pure; counters are trusted to be non-negative."""
    denominator = max(views, 1)
    engagement_ratio = likes / denominator
    dislike_ratio = dislikes / denominator
    mute_ratio = muted_count / denominator

    score = 0.0
    score += min(engagement_ratio * 100, config.engagement_cap)
    score -= min(dislike_ratio * 100, config.dislike_cap)
    score -= min(mute_ratio * config.mute_multiplier, config.mute_cap)
    if has_preview:
        score += config.preview_bonus
    score += min(relevance_score, config.relevance_cap)
    score -= min(clickbait_score * config.clickbait_multiplier, config.clickbait_cap)
    return _clamp(score)
