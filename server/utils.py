"""Pure helpers: place card and trust link formatting."""

from typing import List

from recommender.models.scoring import RecommendedPlace
from trust_graph.models import TrustEdge

from .models import PlaceCard, TrustLinkResponse

# Display precision for card fields
RATING_DECIMALS = 1
SCORE_DECIMALS = 2


def to_place_card(rec: RecommendedPlace) -> PlaceCard:
    """Format a ranked place for the API. Ranking has already used unrounded scores."""
    data = rec.model_dump()
    data["average_rating"] = round(rec.average_rating, RATING_DECIMALS)
    for key in (
        "tag_confidence",
        "social_trust_boost",
        "popularity_score",
        "novelty_score",
        "quality_score",
        "final_ranking_score",
    ):
        data[key] = round(data[key], SCORE_DECIMALS)
    return PlaceCard(**data)


def to_place_cards(recs: List[RecommendedPlace]) -> List[PlaceCard]:
    return [to_place_card(r) for r in recs]


def to_trust_link(edge: TrustEdge) -> TrustLinkResponse:
    return TrustLinkResponse(
        source_user=edge.source,
        target_user=edge.target,
        trust_level=edge.trust_level,
        created_at=edge.created_at,
    )
