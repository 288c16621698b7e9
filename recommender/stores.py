"""
Store abstractions consumed by the pipeline.

PlaceReviewStore supplies places joined with their reviews; TrustedNeighborSource
supplies the requester's trusted users (implemented by trust_graph.TrustGraphService).
Implementations: in-memory (tests, local), JSON files and Firestore (server/services).
Both raise StoreUnavailableError when their backend cannot be reached.
"""

import threading
from typing import Dict, List, Optional, Protocol, Sequence, Set

from .models.place import Place, PlaceCategory, PlaceWithReviews, Review


class PlaceReviewStore(Protocol):
    """Protocol for place + review reads."""

    def fetch_places_with_reviews(
        self,
        city: str,
        categories: Sequence[PlaceCategory],
        limit: int,
    ) -> List[PlaceWithReviews]:
        """
        Return up to `limit` places in `city` whose category is in `categories`,
        each joined with all of its reviews.
        """
        ...


class TrustedNeighborSource(Protocol):
    """Protocol for the social-trust signal."""

    def trusted_neighbors(self, user_id: str) -> Set[str]:
        """Users connected to user_id by a trust edge in either direction."""
        ...


class InMemoryPlaceReviewStore:
    """
    Place/review store held in process memory.
    Used for tests, the local harness, and as the base of the JSON store.
    """

    def __init__(
        self,
        places: Optional[Sequence[Place]] = None,
        reviews: Optional[Sequence[Review]] = None,
    ):
        self._lock = threading.Lock()
        self._places: Dict[str, Place] = {}
        self._reviews: Dict[str, List[Review]] = {}
        for place in places or []:
            self.add_place(place)
        for review in reviews or []:
            self.add_review(review)

    def add_place(self, place: Place) -> None:
        with self._lock:
            self._places[place.id] = place
            self._reviews.setdefault(place.id, [])

    def add_review(self, review: Review) -> None:
        if not review.place_id:
            raise ValueError("review.place_id is required")
        with self._lock:
            self._reviews.setdefault(review.place_id, []).append(review)

    def fetch_places_with_reviews(
        self,
        city: str,
        categories: Sequence[PlaceCategory],
        limit: int,
    ) -> List[PlaceWithReviews]:
        wanted = set(categories)
        city_key = (city or "").strip().casefold()
        out: List[PlaceWithReviews] = []
        with self._lock:
            for place in self._places.values():
                if place.city.strip().casefold() != city_key:
                    continue
                if place.category not in wanted:
                    continue
                reviews = list(self._reviews.get(place.id, []))
                out.append(PlaceWithReviews(place=place, reviews=reviews))
                if len(out) >= limit:
                    break
        return out
