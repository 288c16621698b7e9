"""Shared fixtures: fixed clock, place/review builders, in-memory stores."""

from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional

import pytest

from recommender import InMemoryPlaceReviewStore, Place, PlaceWithReviews, Review
from trust_graph import InMemoryTrustGraphStore, TrustGraphService

# Fixed clock: noon UTC, so novelty ages and open-hours checks are deterministic
NOW = datetime(2026, 6, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def make_place():
    def _make(
        place_id: str,
        category: str = "restaurant",
        city: str = "Trento",
        age_days: Optional[float] = 200,
        **extra,
    ) -> Place:
        created_at = NOW - timedelta(days=age_days) if age_days is not None else None
        return Place(
            id=place_id,
            name=extra.pop("name", place_id.replace("-", " ").title()),
            category=category,
            city=city,
            created_at=created_at,
            **extra,
        )
    return _make


@pytest.fixture
def make_reviews():
    """n reviews of one place: same rating and tags, reviewers r0..r{n-1} unless given."""
    def _make(
        place_id: str,
        n: int,
        rating: float = 4.0,
        tags: Optional[List[str]] = None,
        reviewers: Optional[List[str]] = None,
    ) -> List[Review]:
        reviewers = reviewers or [f"{place_id}-r{i}" for i in range(n)]
        return [
            Review(
                place_id=place_id,
                reviewer_id=reviewers[i % len(reviewers)],
                ratings={"overall": rating},
                experience_tags=list(tags or []),
            )
            for i in range(n)
        ]
    return _make


@pytest.fixture
def entry():
    def _entry(place: Place, reviews: List[Review]) -> PlaceWithReviews:
        return PlaceWithReviews(place=place, reviews=reviews)
    return _entry


@pytest.fixture
def place_store() -> InMemoryPlaceReviewStore:
    return InMemoryPlaceReviewStore()


@pytest.fixture
def trust_store() -> InMemoryTrustGraphStore:
    return InMemoryTrustGraphStore()


@pytest.fixture
def trust_graph(trust_store) -> TrustGraphService:
    return TrustGraphService(trust_store)


def plan(**fields) -> Dict:
    """Travel plan dict with wizard defaults."""
    body = {"destination_area": "trento-city", "travel_type": "solo", "experience_tags": []}
    body.update(fields)
    return body


@pytest.fixture
def make_plan():
    return plan
