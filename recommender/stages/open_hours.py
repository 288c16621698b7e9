"""Open-now post-filter for immediate recommendations. Applied after ranking, never before."""

from datetime import datetime
from typing import List, Optional

from ..catalog import is_open_at
from ..models.scoring import RecommendedPlace


def filter_open_now(
    places: List[RecommendedPlace],
    now: Optional[datetime] = None,
) -> List[RecommendedPlace]:
    """Keep places whose category is likely open at now's hour. Order is preserved."""
    hour = (now or datetime.now()).hour
    return [p for p in places if is_open_at(p.category, hour)]
