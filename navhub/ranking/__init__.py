"""Related-item ranking."""

from navhub.ranking.recommend import (
    DEFAULT_RECOMMENDATION_LIMIT,
    RecommendationEngine,
    RecommendationWeights,
    ScoredCandidate,
)

__all__ = [
    "DEFAULT_RECOMMENDATION_LIMIT",
    "RecommendationEngine",
    "RecommendationWeights",
    "ScoredCandidate",
]
