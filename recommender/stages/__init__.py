"""Pipeline stages: candidate pool, signal extraction, ranking, open-now filter, orchestration."""

from .candidate_pool import CategorySource, get_candidate_pool, resolve_categories
from .open_hours import filter_open_now
from .orchestrator import RecommendationPipeline
from .ranking import QueryKind, rank_candidates
from .signals import extract_signal

__all__ = [
    "CategorySource",
    "QueryKind",
    "RecommendationPipeline",
    "extract_signal",
    "filter_open_now",
    "get_candidate_pool",
    "rank_candidates",
    "resolve_categories",
]
