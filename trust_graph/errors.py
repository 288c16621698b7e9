"""
Trust graph errors.

SelfConnectError and AlreadyConnectedError are recoverable and reported to the
caller so the UI can tell "already connected" apart from a generic failure.
DuplicateEdgeError is raised by stores when their unique (source, target)
constraint rejects an insert; the service translates it.
"""

from recommender.errors import StoreUnavailableError


class TrustGraphError(Exception):
    """Base class for trust graph failures."""


class SelfConnectError(TrustGraphError):
    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"User {user_id!r} cannot connect to themselves")


class AlreadyConnectedError(TrustGraphError):
    def __init__(self, source: str, target: str):
        self.source = source
        self.target = target
        super().__init__(f"User {source!r} is already connected to {target!r}")


class DuplicateEdgeError(TrustGraphError):
    """Store-level unique constraint violation on (source, target)."""

    def __init__(self, source: str, target: str):
        self.source = source
        self.target = target
        super().__init__(f"Trust edge ({source!r}, {target!r}) already exists")


__all__ = [
    "AlreadyConnectedError",
    "DuplicateEdgeError",
    "SelfConnectError",
    "StoreUnavailableError",
    "TrustGraphError",
]
