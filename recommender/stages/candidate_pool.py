"""
Candidate retrieval: resolve the category set, then fetch places with reviews.

Category resolution order (silent, increasingly generic):
1. explicit categories on the travel plan
2. destination area lookup table
3. hard-coded default set for unrecognized areas

The public entry points are resolve_categories and get_candidate_pool.
"""

import logging
from enum import Enum
from typing import List, Tuple

from ..catalog import DEFAULT_CATEGORIES, categories_for_area
from ..models.config import DEFAULT_CONFIG, RecommendationConfig
from ..models.place import PlaceCategory, PlaceWithReviews
from ..models.plan import TravelPlanQuery
from ..stores import PlaceReviewStore

logger = logging.getLogger(__name__)


class CategorySource(str, Enum):
    EXPLICIT = "explicit"
    AREA = "area"
    DEFAULT = "default"


def resolve_categories(query: TravelPlanQuery) -> Tuple[List[PlaceCategory], CategorySource]:
    """Categories to search for this plan, and which rule produced them."""
    if query.categories:
        return list(query.categories), CategorySource.EXPLICIT
    area_categories = categories_for_area(query.destination_area)
    if area_categories is not None:
        return area_categories, CategorySource.AREA
    return list(DEFAULT_CATEGORIES), CategorySource.DEFAULT


def resolve_city(query: TravelPlanQuery, config: RecommendationConfig) -> str:
    return (query.city or "").strip() or config.default_city


def _has_reviews(entry: PlaceWithReviews) -> bool:
    """A place needs at least one review to be scoreable."""
    return len(entry.reviews) > 0


def get_candidate_pool(
    query: TravelPlanQuery,
    store: PlaceReviewStore,
    config: RecommendationConfig = DEFAULT_CONFIG,
) -> List[PlaceWithReviews]:
    """
    Fetch places in the plan's city whose category is in the resolved set,
    capped at candidate_fetch_limit, dropping places without reviews.

    Raises StoreUnavailableError from the store; the pipeline decides how to degrade.
    """
    categories, source = resolve_categories(query)
    city = resolve_city(query, config)
    logger.info(
        "[candidate_pool] city=%s categories=%d source=%s",
        city, len(categories), source.value,
    )
    fetched = store.fetch_places_with_reviews(city, categories, config.candidate_fetch_limit)
    candidates = [entry for entry in fetched if _has_reviews(entry)]
    dropped = len(fetched) - len(candidates)
    if dropped:
        logger.debug("[candidate_pool] dropped %d places without reviews", dropped)
    return candidates[: config.candidate_fetch_limit]
