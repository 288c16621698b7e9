"""
Store Adapter Tests

JSON file stores (load, filter, persist) and the Firestore adapters, using a
minimal fake Firestore client.

Scenarios:
- Malformed review rows are cleaned, never fail a fetch
- A trust link that fails to save is not kept in memory (nor is a failed delete applied)
- Firestore create conflicts become DuplicateEdgeError

Run:
----
    pytest tests/test_stores.py -v
"""

import json
from typing import Dict

import pytest
from google.api_core import exceptions as gcp_exceptions

from recommender import PlaceCategory, StoreUnavailableError
from server.services import JsonPlaceReviewStore, JsonTrustGraphStore, edge_doc_id
from recommender.stages.signals import extract_signal
from server.services import firestore_place_store, firestore_trust_store
from server.services.records import edge_from_record, review_from_record
from trust_graph import DuplicateEdgeError, TrustEdge, TrustGraphService


class TestRecords:

    def test_review_user_id_becomes_reviewer(self):
        review = review_from_record({"place_id": "p1", "user_id": "u1", "ratings": {"overall": 4}, "experience_tags": None})
        assert review.reviewer_id == "u1"
        assert review.experience_tags == []

    def test_malformed_review_fields_are_cleared(self):
        for ratings in (None, "5", [5]):
            review = review_from_record({
                "place_id": "p1",
                "user_id": "u1",
                "ratings": ratings,
                "experience_tags": ["cozy", None, 3],
                "comment": 42,
            })
            assert review.ratings == {}
            assert review.experience_tags == ["cozy"]
            assert review.reviewer_id == "u1"
            assert review.comment is None

    def test_non_string_ids(self):
        review = review_from_record({"place_id": 7, "reviewer_id": 9, "ratings": {"overall": 4}})
        assert review.place_id == "7"
        assert review.reviewer_id is None

    def test_edge_from_trust_link_row(self):
        edge = edge_from_record({
            "source_user": "a",
            "target_user": "b",
            "trust_level": 1,
            "created_at": "2026-01-01T00:00:00+00:00",
        })
        assert edge.key == ("a", "b")
        assert edge.created_at.year == 2026

    def test_edge_doc_id(self):
        assert edge_doc_id("a", "b") == "a__b"


class TestJsonPlaceReviewStore:

    @pytest.fixture
    def files(self, tmp_path):
        places = tmp_path / "places.json"
        reviews = tmp_path / "reviews.json"
        places.write_text(json.dumps({"places": [
            {"id": "p1", "name": "Trattoria", "category": "restaurant", "city": "Trento"},
            {"id": "p2", "name": "Museo", "category": "museum", "city": "Trento"},
            {"id": "p3", "name": "Pizzeria", "category": "restaurant", "city": "Milano"},
        ]}))
        reviews.write_text(json.dumps([
            {"place_id": "p1", "user_id": "u1", "ratings": {"overall": 5}, "experience_tags": ["romantic"]},
            {"place_id": "p2", "user_id": "u2", "ratings": {"overall": 3}},
            {"user_id": "u3", "ratings": {"overall": 1}},
        ]))
        return places, reviews

    def test_fetch_filters_city_and_category(self, files):
        store = JsonPlaceReviewStore(*files)
        out = store.fetch_places_with_reviews("trento", [PlaceCategory.RESTAURANT], 10)
        assert [e.place.id for e in out] == ["p1"]
        assert out[0].reviews[0].reviewer_id == "u1"

    def test_limit(self, files):
        store = JsonPlaceReviewStore(*files)
        out = store.fetch_places_with_reviews("Trento", [PlaceCategory.RESTAURANT, PlaceCategory.MUSEUM], 1)
        assert len(out) == 1

    def test_malformed_review_row_keeps_place(self, tmp_path):
        places = tmp_path / "places.json"
        reviews = tmp_path / "reviews.json"
        places.write_text(json.dumps([{"id": "p1", "name": "Trattoria", "category": "restaurant", "city": "Trento"}]))
        reviews.write_text(json.dumps([
            {"place_id": "p1", "user_id": "u1", "ratings": {"overall": 4}, "experience_tags": ["romantic"]},
            {"place_id": "p1", "user_id": "u2", "ratings": None, "experience_tags": ["quiet", None]},
        ]))
        out = JsonPlaceReviewStore(places, reviews).fetch_places_with_reviews("Trento", [PlaceCategory.RESTAURANT], 10)
        assert [e.place.id for e in out] == ["p1"]

        signal = extract_signal(out[0].reviews, {"u2"})
        assert signal.review_count == 2
        assert signal.average_rating == pytest.approx(4.0)
        assert signal.reviewer_ids == {"u1", "u2"}
        assert signal.tag_set == {"romantic", "quiet"}
        assert signal.trusted_reviewer_count == 1

    def test_missing_file_is_unavailable(self, tmp_path):
        with pytest.raises(StoreUnavailableError):
            JsonPlaceReviewStore(tmp_path / "nope.json", tmp_path / "nope.json")


class TestJsonTrustGraphStore:

    def test_persists_across_instances(self, tmp_path):
        path = tmp_path / "trust_links.json"
        graph = TrustGraphService(JsonTrustGraphStore(path))
        graph.connect("alice", "bob")
        graph.connect("carol", "alice")

        saved = json.loads(path.read_text())["trust_links"]
        assert {(r["source_user"], r["target_user"]) for r in saved} == {("alice", "bob"), ("carol", "alice")}

        reloaded = TrustGraphService(JsonTrustGraphStore(path))
        assert reloaded.trusted_neighbors("alice") == {"bob", "carol"}
        reloaded.disconnect("alice", "bob")
        assert len(json.loads(path.read_text())["trust_links"]) == 1

    def test_duplicate_rows_in_file_ignored(self, tmp_path):
        path = tmp_path / "trust_links.json"
        row = {"source_user": "a", "target_user": "b", "trust_level": 1}
        path.write_text(json.dumps({"trust_links": [row, row]}))
        assert len(JsonTrustGraphStore(path).all_edges()) == 1

    @pytest.fixture
    def unwritable(self, tmp_path):
        # Parent "directory" is a regular file, so every save fails
        blocker = tmp_path / "blocker"
        blocker.write_text("x")
        return blocker / "trust_links.json"

    def test_failed_save_does_not_keep_edge(self, unwritable):
        graph = TrustGraphService(JsonTrustGraphStore(unwritable))
        with pytest.raises(StoreUnavailableError):
            graph.connect("alice", "bob")
        assert not graph.is_connected("alice", "bob")
        assert graph.trusted_neighbors("alice") == set()
        # Retry reports the write failure again, not an existing connection
        with pytest.raises(StoreUnavailableError):
            graph.connect("alice", "bob")

    def test_failed_save_keeps_deleted_edge(self, tmp_path, unwritable):
        store = JsonTrustGraphStore(tmp_path / "trust_links.json")
        graph = TrustGraphService(store)
        graph.connect("alice", "bob")
        store._path = unwritable
        with pytest.raises(StoreUnavailableError):
            graph.disconnect("alice", "bob")
        assert graph.is_connected("alice", "bob")
        assert graph.trusted_neighbors("bob") == {"alice"}


class _FakeSnapshot:
    def __init__(self, data, doc_id=None):
        self._data = data
        self.id = doc_id
        self.exists = data is not None

    def to_dict(self):
        return dict(self._data) if self._data is not None else None


class _FakeDocRef:
    def __init__(self, docs: Dict[str, dict], doc_id: str):
        self._docs = docs
        self.id = doc_id

    def get(self):
        return _FakeSnapshot(self._docs.get(self.id))

    def create(self, data):
        if self.id in self._docs:
            raise gcp_exceptions.AlreadyExists("Document already exists")
        self._docs[self.id] = dict(data)

    def delete(self):
        self._docs.pop(self.id, None)


class _FakeQuery:
    def __init__(self, docs, filters=(), max_results=None):
        self._docs, self._filters, self._limit = docs, tuple(filters), max_results

    def where(self, field, op, value):
        return _FakeQuery(self._docs, self._filters + ((field, op, value),), self._limit)

    def limit(self, n):
        return _FakeQuery(self._docs, self._filters, n)

    def _matches(self, d):
        for field, op, value in self._filters:
            if op == "==" and d.get(field) != value:
                return False
            if op == "in" and d.get(field) not in value:
                return False
        return True

    def stream(self):
        out = [_FakeSnapshot(d, doc_id) for doc_id, d in self._docs.items() if self._matches(d)]
        return out[:self._limit] if self._limit is not None else out


class _FakeCollection:
    def __init__(self):
        self.docs: Dict[str, dict] = {}

    def document(self, doc_id):
        return _FakeDocRef(self.docs, doc_id)

    def where(self, field, op, value):
        return _FakeQuery(self.docs).where(field, op, value)


class _FakeDb:
    def __init__(self):
        self.collections: Dict[str, _FakeCollection] = {}

    def collection(self, name):
        return self.collections.setdefault(name, _FakeCollection())


class TestFirestoreTrustGraphStore:

    @pytest.fixture
    def db(self, monkeypatch):
        fake = _FakeDb()
        monkeypatch.setattr(firestore_trust_store, "firestore_client", lambda *a, **kw: fake)
        return fake

    def test_create_conflict_is_duplicate(self, db):
        store = firestore_trust_store.FirestoreTrustGraphStore()
        store.insert_edge(TrustEdge(source="a", target="b"))
        with pytest.raises(DuplicateEdgeError):
            store.insert_edge(TrustEdge(source="a", target="b"))
        assert list(db.collection("trust_links").docs) == ["a__b"]

    def test_queries_and_delete(self, db):
        store = firestore_trust_store.FirestoreTrustGraphStore()
        graph = TrustGraphService(store)
        graph.connect("a", "b")
        graph.connect("c", "a")
        assert graph.trusted_neighbors("a") == {"b", "c"}
        assert graph.mutual_status("a", "b").outgoing
        assert store.delete_edge("a", "b") is True
        assert store.delete_edge("a", "b") is False
        assert store.get_edge("a", "b") is None


class TestFirestorePlaceReviewStore:

    @pytest.fixture
    def db(self, monkeypatch):
        fake = _FakeDb()
        monkeypatch.setattr(firestore_place_store, "firestore_client", lambda *a, **kw: fake)
        places = fake.collection("places").docs
        places["p1"] = {"name": "Trattoria", "category": "restaurant", "city": "Trento"}
        places["p2"] = {"name": "Museo", "category": "museum", "city": "Trento"}
        reviews = fake.collection("reviews").docs
        reviews["r1"] = {"place_id": "p1", "user_id": "u1", "ratings": {"overall": 5}}
        reviews["r2"] = {"place_id": "p1", "user_id": "u2", "ratings": "five", "experience_tags": "romantic"}
        return fake

    def test_malformed_review_does_not_fail_fetch(self, db):
        store = firestore_place_store.FirestorePlaceReviewStore()
        out = store.fetch_places_with_reviews("Trento", [PlaceCategory.RESTAURANT], 10)
        assert [e.place.id for e in out] == ["p1"]
        assert len(out[0].reviews) == 2
        signal = extract_signal(out[0].reviews, set())
        assert signal.average_rating == pytest.approx(5.0)
        assert signal.review_count == 2

    def test_category_filter_and_limit(self, db):
        store = firestore_place_store.FirestorePlaceReviewStore()
        out = store.fetch_places_with_reviews("Trento", [PlaceCategory.RESTAURANT, PlaceCategory.MUSEUM], 1)
        assert len(out) == 1
        assert store.fetch_places_with_reviews("Milano", [PlaceCategory.RESTAURANT], 10) == []
