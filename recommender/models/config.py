"""
Recommendation configuration: weights, thresholds, and caps for every stage.

RecommendationConfig defaults are defined here. The server may pass a dict
(e.g. from RECOMMENDER_CONFIG_PATH); from_dict() merges it with these defaults.
Changing a weight changes ranking for every request, so overrides go through
this model (and its validator) rather than inline literals.
"""

from typing import Dict, Optional

from pydantic import BaseModel, model_validator


class RecommendationConfig(BaseModel):
    """Configuration for the place recommendation pipeline."""

    # -------------------------------------------------------------------------
    # Ranking Weights (must sum to 1.0)
    # final = w_tag * tag_confidence + w_social * (boost / max_boost)
    #       + w_popularity * popularity + w_quality * quality + w_novelty * novelty
    # -------------------------------------------------------------------------

    # Weight for experience-tag match (vibe match).
    weight_tag_match: float = 0.35
    # Weight for the normalized social trust boost.
    weight_social_trust: float = 0.25
    # Weight for popularity (review volume gated by rating).
    weight_popularity: float = 0.20
    # Weight for quality (average rating / 5).
    weight_quality: float = 0.15
    # Weight for novelty (how recently the place was added).
    weight_novelty: float = 0.05

    # -------------------------------------------------------------------------
    # Social Trust
    # boost = (trusted_reviewers / distinct_reviewers) * max_social_trust_boost
    # -------------------------------------------------------------------------

    max_social_trust_boost: float = 0.5

    # -------------------------------------------------------------------------
    # Popularity
    # 0 below min reviews; low-rated places pinned to low_rating_score;
    # otherwise min(reviews / full_score_reviews, 1) + rating boost, capped at 1.
    # -------------------------------------------------------------------------

    popularity_min_reviews: int = 2
    popularity_full_score_reviews: int = 20
    popularity_rating_floor: float = 3.5
    popularity_low_rating_score: float = 0.1
    popularity_rating_boost_threshold: float = 4.0
    popularity_rating_boost: float = 0.2

    # -------------------------------------------------------------------------
    # Novelty
    # 1.0 up to fresh_days, linear decay to decay_floor at decay_days, then stale.
    # -------------------------------------------------------------------------

    novelty_unknown_score: float = 0.5
    novelty_fresh_days: int = 30
    novelty_decay_days: int = 90
    novelty_decay_floor: float = 0.3
    novelty_stale_score: float = 0.1

    # -------------------------------------------------------------------------
    # Query Classification / Inclusion
    # -------------------------------------------------------------------------

    # Explicit category lists up to this size are "specific category" queries.
    specific_category_max: int = 3
    # Resolved category sets at least this large make a query general.
    general_min_categories: int = 5
    # Preferred tag sets at most this large make a query general.
    general_max_preferred_tags: int = 2
    # General queries include candidates at or above this rating (or any tag match).
    general_min_rating: float = 3.5
    # Mixed queries include candidates at or above this rating (or any tag match).
    mixed_min_rating: float = 4.5
    # Universal fallback includes every retrieved place at or above this rating.
    fallback_min_rating: float = 4.0

    # -------------------------------------------------------------------------
    # Category Diversity (general queries only)
    # -------------------------------------------------------------------------

    # Diversity applies only when more than this many candidates survive.
    diversity_min_candidates: int = 5
    # Max distinct categories seeded with their best candidate.
    diversity_max_categories: int = 10
    # Total size of the diversified list.
    diversity_max_results: int = 15

    # -------------------------------------------------------------------------
    # Retrieval / Output
    # -------------------------------------------------------------------------

    # Places fetched from the store per request (larger than max_results).
    candidate_fetch_limit: int = 50
    # Final ranked list size.
    max_results: int = 20
    # City used when the travel plan does not name one.
    default_city: str = "Trento"

    @model_validator(mode="after")
    def weights_sum_to_one(self):
        total = (
            self.weight_tag_match
            + self.weight_social_trust
            + self.weight_popularity
            + self.weight_quality
            + self.weight_novelty
        )
        if abs(total - 1.0) > 0.01:
            raise ValueError(f"Ranking weights must sum to 1.0, got {total}")
        return self

    @model_validator(mode="after")
    def fetch_limit_covers_output(self):
        if self.candidate_fetch_limit < self.max_results:
            raise ValueError(
                f"candidate_fetch_limit ({self.candidate_fetch_limit}) must be >= "
                f"max_results ({self.max_results})"
            )
        return self

    @classmethod
    def from_dict(cls, config_dict: Dict) -> "RecommendationConfig":
        """Create config from dictionary (e.g., loaded from JSON)."""
        flat = {}
        if "weights" in config_dict:
            for key, value in config_dict["weights"].items():
                flat[f"weight_{key}"] = value
        if "social_trust" in config_dict:
            st = config_dict["social_trust"]
            if "max_boost" in st:
                flat["max_social_trust_boost"] = st["max_boost"]
        if "popularity" in config_dict:
            for key, value in config_dict["popularity"].items():
                flat[f"popularity_{key}"] = value
        if "novelty" in config_dict:
            for key, value in config_dict["novelty"].items():
                flat[f"novelty_{key}"] = value
        for group in ("classification", "retrieval"):
            if group in config_dict:
                flat.update(config_dict[group])
        if "diversity" in config_dict:
            for key, value in config_dict["diversity"].items():
                flat[f"diversity_{key}"] = value
        allowed = set(cls.model_fields)
        filtered = {k: v for k, v in flat.items() if k in allowed}
        return cls.model_validate(filtered)

    def weights(self) -> Dict[str, float]:
        """Ranking weights keyed by signal name (for debug output)."""
        return {
            "tag_match": self.weight_tag_match,
            "social_trust": self.weight_social_trust,
            "popularity": self.weight_popularity,
            "quality": self.weight_quality,
            "novelty": self.weight_novelty,
        }


DEFAULT_CONFIG = RecommendationConfig()


def resolve_config(config: Optional["RecommendationConfig"]) -> "RecommendationConfig":
    """Return config or DEFAULT_CONFIG when none is provided."""
    return config if config is not None else DEFAULT_CONFIG
