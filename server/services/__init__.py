"""Backing logic: concrete place/review and trust graph stores."""

from .firestore_place_store import FirestorePlaceReviewStore
from .firestore_trust_store import FirestoreTrustGraphStore
from .json_stores import JsonPlaceReviewStore, JsonTrustGraphStore
from .records import edge_doc_id

__all__ = [
    "FirestorePlaceReviewStore",
    "FirestoreTrustGraphStore",
    "JsonPlaceReviewStore",
    "JsonTrustGraphStore",
    "edge_doc_id",
]
