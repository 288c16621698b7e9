"""Trust graph: directed trust edges between users and the service over them."""

from .errors import (
    AlreadyConnectedError,
    DuplicateEdgeError,
    SelfConnectError,
    StoreUnavailableError,
    TrustGraphError,
)
from .models import MutualStatus, TrustEdge
from .service import TrustGraphService
from .store import InMemoryTrustGraphStore, TrustGraphStore

__all__ = [
    "AlreadyConnectedError",
    "DuplicateEdgeError",
    "InMemoryTrustGraphStore",
    "MutualStatus",
    "SelfConnectError",
    "StoreUnavailableError",
    "TrustEdge",
    "TrustGraphError",
    "TrustGraphService",
    "TrustGraphStore",
]
