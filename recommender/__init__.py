"""
Place Recommendation Engine

Single entry point for the recommender package:
- models/: RecommendationConfig, Place, Review, TravelPlanQuery, RecommendedPlace
- stages/: candidate_pool, signals, ranking, open_hours, orchestrator
- stores: PlaceReviewStore / TrustedNeighborSource protocols and an in-memory store
"""

from .errors import StoreUnavailableError
from .models import (
    DEFAULT_CONFIG,
    Place,
    PlaceCategory,
    PlaceWithReviews,
    RecommendationCandidate,
    RecommendationConfig,
    RecommendedPlace,
    Review,
    TravelPlanQuery,
    TravelType,
    resolve_config,
)
from .stages import QueryKind, RecommendationPipeline, rank_candidates
from .stores import InMemoryPlaceReviewStore, PlaceReviewStore, TrustedNeighborSource

__all__ = [
    "DEFAULT_CONFIG",
    "InMemoryPlaceReviewStore",
    "Place",
    "PlaceCategory",
    "PlaceReviewStore",
    "PlaceWithReviews",
    "QueryKind",
    "RecommendationCandidate",
    "RecommendationConfig",
    "RecommendationPipeline",
    "RecommendedPlace",
    "Review",
    "StoreUnavailableError",
    "TravelPlanQuery",
    "TravelType",
    "TrustedNeighborSource",
    "rank_candidates",
    "resolve_config",
]
