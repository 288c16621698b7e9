"""Data models for the recommendation pipeline."""

from .config import DEFAULT_CONFIG, RecommendationConfig, resolve_config
from .place import Coordinates, Place, PlaceCategory, PlaceWithReviews, Review
from .plan import DateMode, DestinationArea, TravelDates, TravelPlanQuery, TravelType
from .scoring import PlaceSignal, RecommendationCandidate, RecommendedPlace, days_since

__all__ = [
    "DEFAULT_CONFIG",
    "Coordinates",
    "DateMode",
    "DestinationArea",
    "Place",
    "PlaceCategory",
    "PlaceSignal",
    "PlaceWithReviews",
    "RecommendationCandidate",
    "RecommendationConfig",
    "RecommendedPlace",
    "Review",
    "TravelDates",
    "TravelPlanQuery",
    "TravelType",
    "days_since",
    "resolve_config",
]
