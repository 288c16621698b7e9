"""
Record <-> model mapping shared by the JSON and Firestore adapters.

Stored shapes follow the app's tables:
- places: {id, name, category, city, coordinates?, address?, ..., created_at?}
- reviews: {place_id, user_id | reviewer_id, ratings, experience_tags, comment?}
- trust_links: {source_user, target_user, trust_level, created_at}
"""

from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

from recommender.models.place import Place, Review
from trust_graph.models import TrustEdge


def unwrap_list(data: Any, key: str) -> List[Dict]:
    """Accept either a bare list or {key: [...]}."""
    if isinstance(data, dict):
        data = data.get(key, [])
    return [d for d in data if isinstance(d, dict)] if isinstance(data, list) else []


def place_from_record(d: Dict, doc_id: Optional[str] = None) -> Place:
    d = dict(d)
    if doc_id and not d.get("id"):
        d["id"] = doc_id
    return Place.model_validate(d)


def review_from_record(d: Dict) -> Review:
    """
    Review from a stored row. Malformed fields are cleared rather than rejected
    so one bad row never fails the whole fetch: non-dict ratings become {} (no
    rating contribution), non-string tags are dropped.
    """
    d = dict(d)
    # Reviews table stores the author as user_id
    if not d.get("reviewer_id") and d.get("user_id"):
        d["reviewer_id"] = d["user_id"]
    if not isinstance(d.get("reviewer_id"), str):
        d["reviewer_id"] = None
    if not isinstance(d.get("ratings"), dict):
        d["ratings"] = {}
    tags = d.get("experience_tags")
    d["experience_tags"] = [t for t in tags if isinstance(t, str)] if isinstance(tags, list) else []
    if not isinstance(d.get("comment"), str):
        d["comment"] = None
    if not isinstance(d.get("place_id"), str):
        d["place_id"] = str(d["place_id"]) if d.get("place_id") is not None else ""
    return Review.model_validate(d)


def edge_to_record(edge: TrustEdge) -> Dict:
    return {
        "source_user": edge.source,
        "target_user": edge.target,
        "trust_level": edge.trust_level,
        "created_at": edge.created_at.isoformat(),
    }


def edge_from_record(d: Dict) -> TrustEdge:
    created_at = d.get("created_at")
    fields: Dict[str, Any] = {
        "source": d.get("source_user") or d.get("source"),
        "target": d.get("target_user") or d.get("target"),
        "trust_level": d.get("trust_level", 1),
    }
    if isinstance(created_at, (str, datetime)):
        fields["created_at"] = created_at
    return TrustEdge.model_validate(fields)


def edges_from_records(records: Iterable[Dict]) -> List[TrustEdge]:
    return [edge_from_record(r) for r in records]


def edge_doc_id(source: str, target: str) -> str:
    """Deterministic id for the (source, target) edge; makes create() the unique constraint."""
    return f"{source}__{target}"
