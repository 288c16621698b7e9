"""
Trust Graph Store abstraction.

Durable directed edge storage queried by source or target. Implementations:
in-memory (tests/local), JSON file and Firestore (server/services). Every
implementation must reject a second insert of the same (source, target) pair
atomically by raising DuplicateEdgeError.
"""

import threading
from typing import Dict, Iterable, List, Optional, Protocol, Tuple

from .errors import DuplicateEdgeError
from .models import TrustEdge


class TrustGraphStore(Protocol):
    """Protocol for trust edge read/write."""

    def edges_from(self, source: str) -> List[TrustEdge]:
        """Edges where source == `source`."""
        ...

    def edges_to(self, target: str) -> List[TrustEdge]:
        """Edges where target == `target`."""
        ...

    def get_edge(self, source: str, target: str) -> Optional[TrustEdge]:
        """The (source, target) edge, or None."""
        ...

    def insert_edge(self, edge: TrustEdge) -> None:
        """Insert edge; raise DuplicateEdgeError if (source, target) already exists."""
        ...

    def delete_edge(self, source: str, target: str) -> bool:
        """Delete the (source, target) edge. Return True if one was deleted."""
        ...


class InMemoryTrustGraphStore:
    """
    Trust edges in a dict keyed by (source, target).
    The lock makes check-and-insert atomic, which is the unique constraint.
    """

    def __init__(self, edges: Optional[Iterable[TrustEdge]] = None):
        self._lock = threading.Lock()
        self._edges: Dict[Tuple[str, str], TrustEdge] = {}
        for edge in edges or []:
            self.insert_edge(edge)

    def edges_from(self, source: str) -> List[TrustEdge]:
        with self._lock:
            return [e for e in self._edges.values() if e.source == source]

    def edges_to(self, target: str) -> List[TrustEdge]:
        with self._lock:
            return [e for e in self._edges.values() if e.target == target]

    def get_edge(self, source: str, target: str) -> Optional[TrustEdge]:
        with self._lock:
            return self._edges.get((source, target))

    def insert_edge(self, edge: TrustEdge) -> None:
        with self._lock:
            if edge.key in self._edges:
                raise DuplicateEdgeError(edge.source, edge.target)
            self._edges[edge.key] = edge

    def delete_edge(self, source: str, target: str) -> bool:
        with self._lock:
            return self._edges.pop((source, target), None) is not None

    def all_edges(self) -> List[TrustEdge]:
        with self._lock:
            return list(self._edges.values())
