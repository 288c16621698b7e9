"""
Scoring models: per-request derived values and the ranked output.

Contains:
- days_since: age helper used by novelty scoring
- PlaceSignal: review aggregates for one place
- RecommendationCandidate: a place with its signal and component scores
- RecommendedPlace: flat output row returned to callers
"""

from datetime import datetime, timezone
from typing import List, Optional, Set

from pydantic import BaseModel, Field

from .place import Coordinates, Place, PlaceCategory


def days_since(value: Optional[datetime], now: Optional[datetime] = None) -> Optional[float]:
    """Fractional days since value; None when unknown. Naive datetimes are treated as UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return (now - value).total_seconds() / 86400.0


class PlaceSignal(BaseModel):
    """Aggregates of one place's raw reviews. Recomputed per request."""

    average_rating: float = 0.0
    review_count: int = 0
    reviewer_ids: Set[str] = Field(default_factory=set)
    tag_set: Set[str] = Field(default_factory=set)
    trusted_reviewer_count: int = 0


class RecommendationCandidate(BaseModel):
    """A place with all its scoring components (all scores in [0, 1])."""

    place: Place
    signal: PlaceSignal
    matching_tags: List[str] = Field(default_factory=list)
    tag_confidence: float = 0.0
    social_trust_boost: float = 0.0
    popularity_score: float = 0.0
    novelty_score: float = 0.0
    quality_score: float = 0.0
    final_ranking_score: float = 0.0

    @property
    def id(self) -> str:
        return self.place.id

    @property
    def category(self) -> PlaceCategory:
        return self.place.category

    @property
    def average_rating(self) -> float:
        return self.signal.average_rating

    @property
    def review_count(self) -> int:
        return self.signal.review_count


class RecommendedPlace(BaseModel):
    """Ranked output row: place attributes plus aggregated signals and scores."""

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
    matching_tags: List[str] = Field(default_factory=list)
    tag_confidence: float
    trusted_reviewers_count: int
    social_trust_boost: float
    popularity_score: float
    novelty_score: float
    quality_score: float
    final_ranking_score: float

    @classmethod
    def from_candidate(cls, candidate: RecommendationCandidate) -> "RecommendedPlace":
        place = candidate.place
        return cls(
            id=place.id,
            name=place.name,
            category=place.category,
            city=place.city,
            coordinates=place.coordinates,
            address=place.address,
            description=place.description,
            working_hours=place.working_hours,
            verified=place.verified,
            created_at=place.created_at,
            average_rating=candidate.average_rating,
            review_count=candidate.review_count,
            matching_tags=list(candidate.matching_tags),
            tag_confidence=candidate.tag_confidence,
            trusted_reviewers_count=candidate.signal.trusted_reviewer_count,
            social_trust_boost=candidate.social_trust_boost,
            popularity_score=candidate.popularity_score,
            novelty_score=candidate.novelty_score,
            quality_score=candidate.quality_score,
            final_ranking_score=candidate.final_ranking_score,
        )
