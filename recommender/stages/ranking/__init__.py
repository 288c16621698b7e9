"""
Ranking: blend tag match, social trust, popularity, quality, and novelty into a sorted list.

Public API: rank_candidates, preferred_tags_for.
- core: main orchestration (rank_candidates).
- Submodules: blended_scoring, query_classifier, category_diversity.
"""

from .core import preferred_tags_for, rank_candidates
from .query_classifier import QueryKind

__all__ = [
    "QueryKind",
    "preferred_tags_for",
    "rank_candidates",
]
