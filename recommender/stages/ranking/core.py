"""
Main ranking orchestration: signals, blended scoring, inclusion, diversity.

Pure function of its inputs (retrieved places, trusted neighbors, plan, clock).
Submodules used: blended_scoring, query_classifier, category_diversity.
"""

import logging
from datetime import datetime
from typing import List, Optional, Set

from ...catalog import contextual_tags
from ...models.config import DEFAULT_CONFIG, RecommendationConfig
from ...models.place import PlaceWithReviews
from ...models.plan import TravelPlanQuery
from ...models.scoring import RecommendationCandidate
from ..candidate_pool import resolve_categories
from ..signals import extract_signal
from .blended_scoring import build_candidate
from .category_diversity import select_with_category_diversity
from .query_classifier import QueryKind, classify_query, fallback_candidates, filter_candidates

logger = logging.getLogger(__name__)


def preferred_tags_for(query: TravelPlanQuery) -> Set[str]:
    """Plan's experience tags plus the travel type's contextual tags."""
    return set(query.experience_tags) | set(contextual_tags(query.travel_type))


def score_places(
    places: List[PlaceWithReviews],
    preferred_tags: Set[str],
    trusted_neighbors: Set[str],
    config: RecommendationConfig,
    now: Optional[datetime] = None,
) -> List[RecommendationCandidate]:
    """Extract signals and blended scores; places without reviews are skipped."""
    scored: List[RecommendationCandidate] = []
    for entry in places:
        if not entry.reviews:
            continue
        signal = extract_signal(entry.reviews, trusted_neighbors)
        scored.append(build_candidate(entry.place, signal, preferred_tags, config, now))
    return scored


def rank_candidates(
    query: TravelPlanQuery,
    places: List[PlaceWithReviews],
    trusted_neighbors: Set[str],
    config: RecommendationConfig = DEFAULT_CONFIG,
    now: Optional[datetime] = None,
) -> List[RecommendationCandidate]:
    """
    Rank retrieved places for a travel plan.

    1) score every reviewed place
    2) classify the query and apply its inclusion rule
    3) universal fallback when nothing survives
    4) category diversity for general queries
    5) sort by final_ranking_score and cap at max_results
    """
    categories, _ = resolve_categories(query)
    preferred = preferred_tags_for(query)

    # 1) Signals + blended scores
    scored = score_places(places, preferred, trusted_neighbors, config, now)

    # 2) Classification and inclusion
    kind = classify_query(query, categories, preferred, config)
    included = filter_candidates(scored, kind, config)
    logger.info(
        "[ranking] kind=%s categories=%d preferred_tags=%d scored=%d included=%d",
        kind.value, len(categories), len(preferred), len(scored), len(included),
    )

    # 3) Universal fallback
    if not included and places:
        included = fallback_candidates(scored, config)
        logger.info("[ranking] no matches, fallback to highly rated places: %d", len(included))

    # 4) Category diversity (general queries only)
    if kind == QueryKind.GENERAL and len(included) > config.diversity_min_candidates:
        included = select_with_category_diversity(
            included,
            max_categories=config.diversity_max_categories,
            max_results=config.diversity_max_results,
        )
        logger.debug("[ranking] diversified to %d candidates", len(included))

    # 5) Final ordering
    included.sort(key=lambda c: c.final_ranking_score, reverse=True)
    return included[: config.max_results]
