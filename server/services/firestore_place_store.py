"""
Firestore place/review store: places in 'places', reviews in 'reviews' (keyed by place_id).

Used when DATA_SOURCE=firebase. City matching is exact here (Firestore has no
case-insensitive equality); store city names the way the plan sends them.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

from google.api_core import exceptions as gcp_exceptions

from recommender.errors import StoreUnavailableError
from recommender.models.place import PlaceCategory, PlaceWithReviews, Review

from .firebase_app import firestore_client
from .records import place_from_record, review_from_record

logger = logging.getLogger(__name__)

# Firestore caps 'in' filters at 30 values
IN_QUERY_CHUNK = 30


class FirestorePlaceReviewStore:
    """PlaceReviewStore backed by Firestore 'places' and 'reviews' collections."""

    def __init__(
        self,
        project_id: Optional[str] = None,
        credentials_path: Optional[Union[Path, str]] = None,
    ):
        self._db = firestore_client(project_id, credentials_path)
        self._places = self._db.collection("places")
        self._reviews = self._db.collection("reviews")

    def _reviews_by_place(self, place_ids: List[str]) -> Dict[str, List[Review]]:
        out: Dict[str, List[Review]] = {pid: [] for pid in place_ids}
        for i in range(0, len(place_ids), IN_QUERY_CHUNK):
            chunk = place_ids[i:i + IN_QUERY_CHUNK]
            for doc in self._reviews.where("place_id", "in", chunk).stream():
                d = doc.to_dict() or {}
                out.setdefault(d.get("place_id", ""), []).append(review_from_record(d))
        return out

    def fetch_places_with_reviews(
        self,
        city: str,
        categories: Sequence[PlaceCategory],
        limit: int,
    ) -> List[PlaceWithReviews]:
        values = [c.value for c in categories]
        if not values:
            return []
        try:
            places = []
            for i in range(0, len(values), IN_QUERY_CHUNK):
                remaining = limit - len(places)
                if remaining <= 0:
                    break
                query = (
                    self._places.where("city", "==", city)
                    .where("category", "in", values[i:i + IN_QUERY_CHUNK])
                    .limit(remaining)
                )
                places.extend(place_from_record(doc.to_dict() or {}, doc.id) for doc in query.stream())
            reviews = self._reviews_by_place([p.id for p in places])
        except (gcp_exceptions.GoogleAPICallError, gcp_exceptions.RetryError) as e:
            raise StoreUnavailableError("place store", str(e)) from e
        logger.debug("[firestore] fetched %d places for city=%s", len(places), city)
        return [PlaceWithReviews(place=p, reviews=reviews.get(p.id, [])) for p in places]
