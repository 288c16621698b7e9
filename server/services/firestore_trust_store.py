"""
Firestore trust graph store: edges in 'trust_links', document ID = '{source}__{target}'.

The deterministic document id plus DocumentReference.create() (fails if the
document exists) is the store-level unique constraint on (source, target).
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from google.api_core import exceptions as gcp_exceptions

from trust_graph.errors import DuplicateEdgeError, StoreUnavailableError
from trust_graph.models import TrustEdge

from .firebase_app import firestore_client
from .records import edge_doc_id, edge_from_record, edge_to_record

logger = logging.getLogger(__name__)

_UNAVAILABLE = (gcp_exceptions.GoogleAPICallError, gcp_exceptions.RetryError)


class FirestoreTrustGraphStore:
    """TrustGraphStore backed by the Firestore 'trust_links' collection."""

    def __init__(
        self,
        project_id: Optional[str] = None,
        credentials_path: Optional[Union[Path, str]] = None,
    ):
        self._db = firestore_client(project_id, credentials_path)
        self._coll = self._db.collection("trust_links")

    def _query(self, field: str, user_id: str) -> List[TrustEdge]:
        try:
            docs = self._coll.where(field, "==", user_id).stream()
            return [edge_from_record(doc.to_dict() or {}) for doc in docs]
        except _UNAVAILABLE as e:
            raise StoreUnavailableError("trust graph", str(e)) from e

    def edges_from(self, source: str) -> List[TrustEdge]:
        return self._query("source_user", source)

    def edges_to(self, target: str) -> List[TrustEdge]:
        return self._query("target_user", target)

    def get_edge(self, source: str, target: str) -> Optional[TrustEdge]:
        try:
            doc = self._coll.document(edge_doc_id(source, target)).get()
        except _UNAVAILABLE as e:
            raise StoreUnavailableError("trust graph", str(e)) from e
        return edge_from_record(doc.to_dict() or {}) if doc.exists else None

    def insert_edge(self, edge: TrustEdge) -> None:
        ref = self._coll.document(edge_doc_id(edge.source, edge.target))
        try:
            ref.create(edge_to_record(edge))
        except gcp_exceptions.Conflict:
            # AlreadyExists: a concurrent or earlier connect won
            raise DuplicateEdgeError(edge.source, edge.target) from None
        except _UNAVAILABLE as e:
            raise StoreUnavailableError("trust graph", str(e)) from e

    def delete_edge(self, source: str, target: str) -> bool:
        ref = self._coll.document(edge_doc_id(source, target))
        try:
            if not ref.get().exists:
                return False
            ref.delete()
        except _UNAVAILABLE as e:
            raise StoreUnavailableError("trust graph", str(e)) from e
        logger.debug("[firestore] deleted trust link %s", ref.id)
        return True
