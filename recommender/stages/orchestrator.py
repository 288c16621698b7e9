"""
Pipeline orchestrator: resolve trusted neighbors and retrieve candidates, then rank.

The main entry point is RecommendationPipeline.recommend. Each call is a pure
function of its inputs and current store contents; the pipeline holds only
injected stores and config. Store outages degrade the affected input (empty
neighbors or empty candidates) and never raise to the caller.
"""

import logging
from datetime import datetime
from typing import List, Optional, Set

from ..errors import StoreUnavailableError
from ..models.config import RecommendationConfig, resolve_config
from ..models.place import PlaceWithReviews
from ..models.plan import TravelPlanQuery
from ..models.scoring import RecommendedPlace
from ..stores import PlaceReviewStore, TrustedNeighborSource
from .candidate_pool import get_candidate_pool
from .open_hours import filter_open_now
from .ranking import rank_candidates

logger = logging.getLogger(__name__)


class RecommendationPipeline:
    """
    Orchestrates retrieval and ranking:
    1. trusted neighbors (empty if no requester)
    2. candidate places with reviews
    3. signals, scoring, classification, diversity, sort, truncate
    """

    def __init__(
        self,
        place_store: PlaceReviewStore,
        trust_source: TrustedNeighborSource,
        config: Optional[RecommendationConfig] = None,
    ):
        self.place_store = place_store
        self.trust_source = trust_source
        self.config = resolve_config(config)

    def fetch_trusted_neighbors(self, requester_id: Optional[str]) -> Set[str]:
        """Trusted neighbors of the requester; empty for anonymous requests or store outages."""
        if not requester_id or not requester_id.strip():
            return set()
        try:
            neighbors = self.trust_source.trusted_neighbors(requester_id.strip())
        except StoreUnavailableError as e:
            logger.warning("[pipeline] trust graph unavailable, continuing without social bias: %s", e)
            return set()
        logger.info("[pipeline] social bias enabled: %d trusted users", len(neighbors))
        return set(neighbors)

    def fetch_candidates(self, query: TravelPlanQuery) -> List[PlaceWithReviews]:
        """Candidate places with reviews; empty on store outage."""
        try:
            return get_candidate_pool(query, self.place_store, self.config)
        except StoreUnavailableError as e:
            logger.warning("[pipeline] place store unavailable, returning no candidates: %s", e)
            return []

    def rank(
        self,
        query: TravelPlanQuery,
        places: List[PlaceWithReviews],
        trusted_neighbors: Set[str],
        now: Optional[datetime] = None,
    ) -> List[RecommendedPlace]:
        """Rank already-fetched inputs (used when fetches run concurrently)."""
        ranked = rank_candidates(query, places, trusted_neighbors, self.config, now)
        return [RecommendedPlace.from_candidate(c) for c in ranked]

    def recommend(
        self,
        query: TravelPlanQuery,
        requester_id: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> List[RecommendedPlace]:
        """Ranked places for a travel plan, at most max_results long."""
        trusted = self.fetch_trusted_neighbors(requester_id)
        places = self.fetch_candidates(query)
        if not places:
            logger.info("[pipeline] no places found matching criteria")
            return []
        results = self.rank(query, places, trusted, now)
        logger.info("[pipeline] returning %d recommendations", len(results))
        return results

    def recommend_immediate(
        self,
        query: TravelPlanQuery,
        requester_id: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> List[RecommendedPlace]:
        """Ranked places filtered to those likely open at `now`."""
        return filter_open_now(self.recommend(query, requester_id, now), now)
