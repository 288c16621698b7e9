"""
Signal extraction: aggregate one place's raw reviews into a PlaceSignal.

average_rating is the mean of per-review means across rating dimensions.
A review whose ratings are empty or malformed contributes no rating but still
counts toward review_count, reviewer_ids, and tag_set.
"""

import math
from typing import Any, Dict, Iterable, Optional, Set

from ..models.place import Review
from ..models.scoring import PlaceSignal

MIN_RATING = 1.0
MAX_RATING = 5.0


def _is_valid_score(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    if not math.isfinite(value):
        return False
    return MIN_RATING <= value <= MAX_RATING


def review_rating(ratings: Optional[Dict[str, Any]]) -> Optional[float]:
    """Mean across rating dimensions, or None if the review has no usable rating."""
    if not ratings or not isinstance(ratings, dict):
        return None
    values = list(ratings.values())
    if not all(_is_valid_score(v) for v in values):
        return None
    return sum(float(v) for v in values) / len(values)


def extract_signal(reviews: Iterable[Review], trusted_neighbors: Set[str]) -> PlaceSignal:
    """Aggregate reviews into rating, reviewer set, tag set, and trusted reviewer count."""
    total_rating = 0.0
    rated_reviews = 0
    review_count = 0
    reviewer_ids: Set[str] = set()
    tag_set: Set[str] = set()

    for review in reviews:
        review_count += 1
        if review.reviewer_id:
            reviewer_ids.add(review.reviewer_id)
        tag_set.update(t for t in review.experience_tags if t)
        rating = review_rating(review.ratings)
        if rating is not None:
            total_rating += rating
            rated_reviews += 1

    average_rating = total_rating / rated_reviews if rated_reviews else 0.0
    return PlaceSignal(
        average_rating=average_rating,
        review_count=review_count,
        reviewer_ids=reviewer_ids,
        tag_set=tag_set,
        trusted_reviewer_count=len(reviewer_ids & trusted_neighbors),
    )
