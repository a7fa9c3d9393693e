"""Pure scoring functions: quality (viewer-agnostic) and relevance (viewer-scoped)."""

from .quality import quality_score
from .relevance import relevance_score

__all__ = [
    "quality_score",
    "relevance_score",
]
