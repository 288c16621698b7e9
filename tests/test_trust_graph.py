"""
Trust Graph Tests

Tests connect/disconnect semantics, neighbor resolution, and mutual status
over the in-memory store.

Scenarios:
----------
1. connect creates exactly one edge; a second connect reports "already connected"
2. self-connect is rejected and nothing is stored
3. disconnect is idempotent
4. trusted neighbors are 1-hop, direction-agnostic, never include the user
5. mutual status is symmetric

Run:
----
    pytest tests/test_trust_graph.py -v
"""

import threading
from datetime import datetime, timezone

import pytest

from trust_graph import (
    AlreadyConnectedError,
    DuplicateEdgeError,
    InMemoryTrustGraphStore,
    SelfConnectError,
    TrustEdge,
    TrustGraphService,
)


class TestConnect:

    def test_connect_creates_edge(self, trust_graph, trust_store):
        edge = trust_graph.connect("alice", "bob")
        assert edge.source == "alice"
        assert edge.target == "bob"
        assert edge.trust_level == 1
        assert trust_store.get_edge("alice", "bob") is not None
        assert trust_graph.is_connected("alice", "bob")
        assert not trust_graph.is_connected("bob", "alice")

    def test_double_connect_reports_already_connected(self, trust_graph, trust_store):
        first = trust_graph.connect("alice", "bob")
        with pytest.raises(AlreadyConnectedError):
            trust_graph.connect("alice", "bob")
        edges = [e for e in trust_store.all_edges() if e.key == ("alice", "bob")]
        assert len(edges) == 1
        # Existing edge is left untouched
        assert edges[0].created_at == first.created_at

    def test_self_connect_rejected(self, trust_graph, trust_store):
        with pytest.raises(SelfConnectError):
            trust_graph.connect("alice", "alice")
        assert trust_store.all_edges() == []

    def test_concurrent_connect_leaves_one_edge(self):
        store = InMemoryTrustGraphStore()
        graph = TrustGraphService(store)
        outcomes = []

        def worker():
            try:
                graph.connect("alice", "bob")
                outcomes.append("created")
            except AlreadyConnectedError:
                outcomes.append("already")

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert outcomes.count("created") == 1
        assert outcomes.count("already") == 7
        assert len(store.all_edges()) == 1

    def test_store_rejects_duplicate_insert(self, trust_store):
        trust_store.insert_edge(TrustEdge(source="a", target="b"))
        with pytest.raises(DuplicateEdgeError):
            trust_store.insert_edge(TrustEdge(source="a", target="b"))

    def test_edge_model_rejects_self_edge(self):
        with pytest.raises(ValueError):
            TrustEdge(source="a", target="a")


class TestDisconnect:

    def test_disconnect_removes_edge(self, trust_graph):
        trust_graph.connect("alice", "bob")
        trust_graph.disconnect("alice", "bob")
        assert not trust_graph.is_connected("alice", "bob")

    def test_disconnect_missing_edge_is_noop(self, trust_graph):
        trust_graph.disconnect("alice", "bob")
        trust_graph.connect("alice", "bob")
        trust_graph.disconnect("alice", "bob")
        trust_graph.disconnect("alice", "bob")
        assert not trust_graph.is_connected("alice", "bob")

    def test_disconnect_only_removes_one_direction(self, trust_graph):
        trust_graph.connect("alice", "bob")
        trust_graph.connect("bob", "alice")
        trust_graph.disconnect("alice", "bob")
        assert trust_graph.is_connected("bob", "alice")


class TestNeighbors:

    def test_neighbors_are_direction_agnostic(self, trust_graph):
        trust_graph.connect("alice", "bob")
        trust_graph.connect("carol", "alice")
        assert trust_graph.trusted_neighbors("alice") == {"bob", "carol"}

    def test_neighbors_are_one_hop_only(self, trust_graph):
        trust_graph.connect("alice", "bob")
        trust_graph.connect("bob", "dave")
        assert "dave" not in trust_graph.trusted_neighbors("alice")

    def test_neighbors_never_include_self(self, trust_graph):
        trust_graph.connect("alice", "bob")
        trust_graph.connect("bob", "alice")
        neighbors = trust_graph.trusted_neighbors("alice")
        assert neighbors == {"bob"}
        assert "alice" not in neighbors

    def test_unknown_user_has_no_neighbors(self, trust_graph):
        assert trust_graph.trusted_neighbors("nobody") == set()

    def test_connections_and_trusted_by_newest_first(self, trust_store, trust_graph):
        trust_store.insert_edge(TrustEdge(source="alice", target="bob", created_at=datetime(2026, 1, 1, tzinfo=timezone.utc)))
        trust_store.insert_edge(TrustEdge(source="alice", target="carol", created_at=datetime(2026, 3, 1, tzinfo=timezone.utc)))
        trust_store.insert_edge(TrustEdge(source="dave", target="alice", created_at=datetime(2026, 2, 1, tzinfo=timezone.utc)))

        assert [e.target for e in trust_graph.connections("alice")] == ["carol", "bob"]
        assert [e.source for e in trust_graph.trusted_by("alice")] == ["dave"]


class TestMutualStatus:

    @pytest.mark.parametrize("edges", [
        [],
        [("a", "b")],
        [("b", "a")],
        [("a", "b"), ("b", "a")],
    ])
    def test_mutual_is_symmetric(self, edges):
        graph = TrustGraphService(InMemoryTrustGraphStore())
        for source, target in edges:
            graph.connect(source, target)
        assert graph.mutual_status("a", "b").mutual == graph.mutual_status("b", "a").mutual

    def test_mutual_status_fields(self, trust_graph):
        trust_graph.connect("a", "b")
        status = trust_graph.mutual_status("a", "b")
        assert status.outgoing and not status.incoming and not status.mutual
        trust_graph.connect("b", "a")
        assert trust_graph.mutual_status("a", "b").mutual
        assert trust_graph.mutual_status("a", "b").model_dump()["mutual"] is True
