"""
JSON file stores for local development (DATA_SOURCE=json).

Places and reviews are read once at startup. Trust links are persisted back
to their file after every write so connections survive restarts.
"""

import json
import logging
import threading
from pathlib import Path
from typing import Union

from recommender.errors import StoreUnavailableError
from recommender.stores import InMemoryPlaceReviewStore
from trust_graph.errors import DuplicateEdgeError
from trust_graph.models import TrustEdge
from trust_graph.store import InMemoryTrustGraphStore

from .records import edge_to_record, edges_from_records, place_from_record, review_from_record, unwrap_list

logger = logging.getLogger(__name__)


def _read_json(path: Path, store: str):
    try:
        with open(path) as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise StoreUnavailableError(store, f"{path}: {e}") from e


class JsonPlaceReviewStore(InMemoryPlaceReviewStore):
    """Places and reviews loaded from two JSON files."""

    def __init__(self, places_path: Union[Path, str], reviews_path: Union[Path, str]):
        super().__init__()
        places = unwrap_list(_read_json(Path(places_path), "place store"), "places")
        reviews = unwrap_list(_read_json(Path(reviews_path), "place store"), "reviews")
        for d in places:
            self.add_place(place_from_record(d))
        skipped = 0
        for d in reviews:
            if not d.get("place_id"):
                skipped += 1
                continue
            self.add_review(review_from_record(d))
        logger.info(
            "[json_store] loaded %d places, %d reviews (%d without place_id skipped)",
            len(places), len(reviews) - skipped, skipped,
        )


class JsonTrustGraphStore(InMemoryTrustGraphStore):
    """Trust edges kept in memory and written through to a JSON file."""

    def __init__(self, path: Union[Path, str]):
        self._path = Path(path)
        self._write_lock = threading.Lock()
        edges = []
        if self._path.exists():
            edges = edges_from_records(unwrap_list(_read_json(self._path, "trust graph"), "trust_links"))
        super().__init__()
        for edge in edges:
            try:
                super().insert_edge(edge)
            except DuplicateEdgeError:
                logger.warning("[json_store] duplicate trust link ignored: %s -> %s", edge.source, edge.target)
        logger.info("[json_store] loaded %d trust links from %s", len(self.all_edges()), self._path)

    def _save(self) -> None:
        try:
            with self._write_lock:
                out = {"trust_links": [edge_to_record(e) for e in self.all_edges()]}
                self._path.parent.mkdir(parents=True, exist_ok=True)
                with open(self._path, "w") as f:
                    json.dump(out, f, indent=2)
        except OSError as e:
            raise StoreUnavailableError("trust graph", f"{self._path}: {e}") from e

    def insert_edge(self, edge: TrustEdge) -> None:
        super().insert_edge(edge)
        try:
            self._save()
        except StoreUnavailableError:
            # Unsaved edge must not linger in memory
            super().delete_edge(edge.source, edge.target)
            raise

    def delete_edge(self, source: str, target: str) -> bool:
        existing = self.get_edge(source, target)
        removed = super().delete_edge(source, target)
        if removed:
            try:
                self._save()
            except StoreUnavailableError:
                super().insert_edge(existing)
                raise
        return removed
