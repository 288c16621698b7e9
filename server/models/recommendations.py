"""Request/response models for the recommendation endpoints."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from recommender.models.place import Coordinates, PlaceCategory
from recommender.models.plan import TravelPlanQuery


class RecommendationRequest(BaseModel):
    """Travel plan from the wizard plus the (optional) signed-in user for social bias."""

    travel_plan: TravelPlanQuery
    user_id: Optional[str] = None


class PlaceCard(BaseModel):
    """A recommended place as shown to the traveler (scores rounded for display)."""

    id: str
    name: str
    category: PlaceCategory
    city: str
    coordinates: Optional[Coordinates] = None
    address: Optional[str] = None
    description: Optional[str] = None
    working_hours: Optional[str] = None
    verified: bool = False
    created_at: Optional[datetime] = None

    average_rating: float
    review_count: int
    matching_tags: List[str] = []
    tag_confidence: float
    trusted_reviewers_count: int
    social_trust_boost: float
    popularity_score: float
    novelty_score: float
    quality_score: float
    final_ranking_score: float


class RecommendationResponse(BaseModel):
    success: bool = True
    recommendations: List[PlaceCard] = Field(default_factory=list)
    count: int = 0
    social_bias_enabled: bool = False
