"""
TrustGraphService: connect/disconnect users and answer neighbor and mutuality queries.

Stateless apart from the injected store. The one-edge-per-ordered-pair invariant
is enforced by the store's unique constraint, not by checking before insert:
connect inserts directly and translates the store's DuplicateEdgeError into
AlreadyConnectedError, leaving the existing edge untouched.
"""

import logging
from typing import List, Set

from .errors import AlreadyConnectedError, DuplicateEdgeError, SelfConnectError
from .models import MutualStatus, TrustEdge
from .store import TrustGraphStore

logger = logging.getLogger(__name__)

DIRECT_TRUST_LEVEL = 1


class TrustGraphService:
    """Trust edges between users, consumed by the recommender for social bias."""

    def __init__(self, store: TrustGraphStore):
        self.store = store

    def connect(self, source: str, target: str) -> TrustEdge:
        """
        Create the edge source -> target with trust_level 1.

        Raises:
            SelfConnectError: source == target.
            AlreadyConnectedError: the edge already exists (including a concurrent insert).
            StoreUnavailableError: the store could not be reached.
        """
        if source == target:
            raise SelfConnectError(source)
        edge = TrustEdge(source=source, target=target, trust_level=DIRECT_TRUST_LEVEL)
        try:
            self.store.insert_edge(edge)
        except DuplicateEdgeError:
            logger.info("[trust_graph] already connected: %s -> %s", source, target)
            raise AlreadyConnectedError(source, target) from None
        logger.info("[trust_graph] connected: %s -> %s", source, target)
        return edge

    def disconnect(self, source: str, target: str) -> None:
        """Remove the edge source -> target. No error if it does not exist."""
        removed = self.store.delete_edge(source, target)
        if removed:
            logger.info("[trust_graph] disconnected: %s -> %s", source, target)

    def is_connected(self, source: str, target: str) -> bool:
        """True if the edge source -> target exists."""
        if source == target:
            return False
        return self.store.get_edge(source, target) is not None

    def mutual_status(self, source: str, target: str) -> MutualStatus:
        return MutualStatus(
            outgoing=self.is_connected(source, target),
            incoming=self.is_connected(target, source),
        )

    def trusted_neighbors(self, user_id: str) -> Set[str]:
        """
        Users one hop away in either direction (targets of outgoing edges plus
        sources of incoming edges). Deeper hops are not computed.
        """
        neighbors = {e.target for e in self.store.edges_from(user_id)}
        neighbors.update(e.source for e in self.store.edges_to(user_id))
        neighbors.discard(user_id)
        return neighbors

    def connections(self, user_id: str) -> List[TrustEdge]:
        """Outgoing edges (users this user trusts), newest first."""
        return sorted(self.store.edges_from(user_id), key=lambda e: e.created_at, reverse=True)

    def trusted_by(self, user_id: str) -> List[TrustEdge]:
        """Incoming edges (users who trust this user), newest first."""
        return sorted(self.store.edges_to(user_id), key=lambda e: e.created_at, reverse=True)
