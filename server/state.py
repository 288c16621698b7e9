"""Application state: stores, trust graph service, and the recommendation pipeline."""

import logging
from typing import Optional

from recommender import RecommendationConfig, RecommendationPipeline
from recommender.stores import InMemoryPlaceReviewStore, PlaceReviewStore
from trust_graph import InMemoryTrustGraphStore, TrustGraphService, TrustGraphStore

from .config import ServerConfig, get_config
from .services import (
    FirestorePlaceReviewStore,
    FirestoreTrustGraphStore,
    JsonPlaceReviewStore,
    JsonTrustGraphStore,
)

logger = logging.getLogger(__name__)


class AppState:
    """Global application state."""

    def __init__(
        self,
        config: ServerConfig,
        place_store: Optional[PlaceReviewStore] = None,
        trust_store: Optional[TrustGraphStore] = None,
        recommendation_config: Optional[RecommendationConfig] = None,
    ):
        self.config = config
        self.recommendation_config = recommendation_config or config.load_recommendation_config()

        self.place_store = place_store or self._create_place_store(config)
        self.trust_store = trust_store or self._create_trust_store(config)
        logger.info(
            "[startup] Place store: %s, trust store: %s",
            type(self.place_store).__name__,
            type(self.trust_store).__name__,
        )

        self.trust_graph = TrustGraphService(self.trust_store)
        self.pipeline = RecommendationPipeline(
            place_store=self.place_store,
            trust_source=self.trust_graph,
            config=self.recommendation_config,
        )

    def _create_place_store(self, config: ServerConfig) -> PlaceReviewStore:
        """Create place/review store from DATA_SOURCE (Firestore, JSON, or in-memory)."""
        if config.data_source == "firebase":
            return FirestorePlaceReviewStore(
                project_id=config.firebase_project_id,
                credentials_path=config.firebase_credentials_path,
            )
        if config.data_source == "json":
            return JsonPlaceReviewStore(config.places_json_path, config.reviews_json_path)
        return InMemoryPlaceReviewStore()

    def _create_trust_store(self, config: ServerConfig) -> TrustGraphStore:
        """Create trust edge store from DATA_SOURCE (Firestore, JSON, or in-memory)."""
        if config.data_source == "firebase":
            return FirestoreTrustGraphStore(
                project_id=config.firebase_project_id,
                credentials_path=config.firebase_credentials_path,
            )
        if config.data_source == "json" and config.trust_links_json_path:
            return JsonTrustGraphStore(config.trust_links_json_path)
        return InMemoryTrustGraphStore()


_state: Optional[AppState] = None


def get_state() -> AppState:
    global _state
    if _state is None:
        config = get_config()
        _state = AppState(config)
    return _state


def set_state(state: Optional[AppState]) -> None:
    """Replace the global state (tests inject in-memory stores; None forces a rebuild)."""
    global _state
    _state = state
