"""
Query classification and inclusion filtering.

- SPECIFIC_CATEGORY: explicit categories, at most specific_category_max of them;
  every scored candidate is included.
- GENERAL: many categories, a broad marker tag, or very few preferred tags;
  include on decent rating or any tag match.
- MIXED: everything else; include on any tag match or an excellent rating.

When nothing survives but places were retrieved, the universal fallback keeps
every candidate rated at least fallback_min_rating.
"""

from enum import Enum
from typing import List, Sequence, Set

from ...catalog import BROAD_MARKER_TAGS
from ...models.config import RecommendationConfig
from ...models.place import PlaceCategory
from ...models.plan import TravelPlanQuery
from ...models.scoring import RecommendationCandidate


class QueryKind(str, Enum):
    SPECIFIC_CATEGORY = "specific_category"
    GENERAL = "general"
    MIXED = "mixed"


def classify_query(
    query: TravelPlanQuery,
    resolved_categories: Sequence[PlaceCategory],
    preferred_tags: Set[str],
    config: RecommendationConfig,
) -> QueryKind:
    """Decide how strictly candidates are included for this query."""
    if query.categories and len(query.categories) <= config.specific_category_max:
        return QueryKind.SPECIFIC_CATEGORY
    if (
        len(resolved_categories) >= config.general_min_categories
        or bool(preferred_tags & BROAD_MARKER_TAGS)
        or len(preferred_tags) <= config.general_max_preferred_tags
    ):
        return QueryKind.GENERAL
    return QueryKind.MIXED


def is_included(
    candidate: RecommendationCandidate,
    kind: QueryKind,
    config: RecommendationConfig,
) -> bool:
    if kind == QueryKind.SPECIFIC_CATEGORY:
        return True
    if kind == QueryKind.GENERAL:
        return candidate.average_rating >= config.general_min_rating or candidate.tag_confidence > 0
    return candidate.tag_confidence > 0 or candidate.average_rating >= config.mixed_min_rating


def filter_candidates(
    candidates: List[RecommendationCandidate],
    kind: QueryKind,
    config: RecommendationConfig,
) -> List[RecommendationCandidate]:
    return [c for c in candidates if is_included(c, kind, config)]


def fallback_candidates(
    candidates: List[RecommendationCandidate],
    config: RecommendationConfig,
) -> List[RecommendationCandidate]:
    """Every candidate rated at least fallback_min_rating, ignoring tags and query kind."""
    return [
        c for c in candidates
        if c.review_count > 0 and c.average_rating >= config.fallback_min_rating
    ]
