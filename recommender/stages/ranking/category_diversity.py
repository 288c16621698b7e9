"""
Category diversity for general queries.

Orders candidates by average_rating + social_trust_boost, seeds the list with the
best candidate of each distinct category (up to max_categories), then fills the
remaining slots with the next-best candidates regardless of category.
"""

from typing import List, Set

from ...models.scoring import RecommendationCandidate


def diversity_sort_key(candidate: RecommendationCandidate) -> float:
    return candidate.average_rating + candidate.social_trust_boost


def select_with_category_diversity(
    candidates: List[RecommendationCandidate],
    max_categories: int = 10,
    max_results: int = 15,
) -> List[RecommendationCandidate]:
    """
    Diversified selection. Input is not mutated.

    Args:
        candidates: Included candidates (any order).
        max_categories: Max categories seeded in the first pass.
        max_results: Total size of the returned list.

    Returns:
        Up to max_results candidates, best-per-category first.
    """
    ordered = sorted(candidates, key=diversity_sort_key, reverse=True)
    selected: List[RecommendationCandidate] = []
    selected_ids: Set[str] = set()
    categories_used: Set[str] = set()

    # First pass: best candidate per category
    for candidate in ordered:
        if len(selected) >= min(max_categories, max_results):
            break
        if candidate.category in categories_used:
            continue
        selected.append(candidate)
        selected_ids.add(candidate.id)
        categories_used.add(candidate.category)

    # Second pass: fill with next best, any category
    for candidate in ordered:
        if len(selected) >= max_results:
            break
        if candidate.id in selected_ids:
            continue
        selected.append(candidate)
        selected_ids.add(candidate.id)

    return selected
