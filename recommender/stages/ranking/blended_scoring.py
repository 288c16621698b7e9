"""
Per-candidate blended scoring: tag match, social trust, popularity, quality, novelty.

Builds a RecommendationCandidate for one place given its signal, the preferred
tag set, and config. All component scores land in [0, 1].
"""

from datetime import datetime
from typing import Optional, Set, Tuple

from ...models.config import RecommendationConfig
from ...models.place import Place
from ...models.scoring import PlaceSignal, RecommendationCandidate, days_since


def tag_confidence(preferred_tags: Set[str], place_tags: Set[str]) -> Tuple[Set[str], float]:
    """
    Matching tags and confidence = |matching| / max(|preferred|, |place tags|).

    The larger denominator penalizes both an under-specified request and an
    over-tagged place.
    """
    matching = preferred_tags & place_tags
    if not matching:
        return matching, 0.0
    return matching, len(matching) / max(len(preferred_tags), len(place_tags))


def social_trust_boost(signal: PlaceSignal, config: RecommendationConfig) -> float:
    """Share of distinct reviewers the requester trusts, scaled to max_social_trust_boost."""
    if not signal.reviewer_ids:
        return 0.0
    share = signal.trusted_reviewer_count / len(signal.reviewer_ids)
    return min(share, 1.0) * config.max_social_trust_boost


def popularity_score(review_count: int, average_rating: float, config: RecommendationConfig) -> float:
    """Review volume gated by a rating floor, with a bonus for highly rated places."""
    if review_count < config.popularity_min_reviews:
        return 0.0
    if average_rating < config.popularity_rating_floor:
        return config.popularity_low_rating_score
    review_score = min(review_count / config.popularity_full_score_reviews, 1.0)
    boost = (
        config.popularity_rating_boost
        if average_rating >= config.popularity_rating_boost_threshold
        else 0.0
    )
    return min(review_score + boost, 1.0)


def novelty_score(
    created_at: Optional[datetime],
    config: RecommendationConfig,
    now: Optional[datetime] = None,
) -> float:
    """Full score while fresh, linear decay to decay_floor, then stale."""
    age = days_since(created_at, now)
    if age is None:
        return config.novelty_unknown_score
    if age <= config.novelty_fresh_days:
        return 1.0
    if age <= config.novelty_decay_days:
        window = config.novelty_decay_days - config.novelty_fresh_days
        decayed = 1.0 - ((age - config.novelty_fresh_days) / window) * (1.0 - config.novelty_decay_floor)
        return max(config.novelty_decay_floor, decayed)
    return config.novelty_stale_score


def quality_score(average_rating: float) -> float:
    """Average rating normalized from 0-5 to 0-1."""
    return max(0.0, min(average_rating / 5.0, 1.0))


def final_ranking_score(
    tag_conf: float,
    social_boost: float,
    popularity: float,
    quality: float,
    novelty: float,
    config: RecommendationConfig,
) -> float:
    """Weighted blend; social boost is normalized by max_social_trust_boost first."""
    social_norm = social_boost / config.max_social_trust_boost if config.max_social_trust_boost else 0.0
    final = (
        config.weight_tag_match * tag_conf
        + config.weight_social_trust * social_norm
        + config.weight_popularity * popularity
        + config.weight_quality * quality
        + config.weight_novelty * novelty
    )
    return max(0.0, min(final, 1.0))


def build_candidate(
    place: Place,
    signal: PlaceSignal,
    preferred_tags: Set[str],
    config: RecommendationConfig,
    now: Optional[datetime] = None,
) -> RecommendationCandidate:
    """Compute every component score for one place and blend them."""
    matching, tag_conf = tag_confidence(preferred_tags, signal.tag_set)
    social = social_trust_boost(signal, config)
    popularity = popularity_score(signal.review_count, signal.average_rating, config)
    novelty = novelty_score(place.created_at, config, now)
    quality = quality_score(signal.average_rating)
    return RecommendationCandidate(
        place=place,
        signal=signal,
        matching_tags=sorted(matching),
        tag_confidence=tag_conf,
        social_trust_boost=social,
        popularity_score=popularity,
        novelty_score=novelty,
        quality_score=quality,
        final_ranking_score=final_ranking_score(tag_conf, social, popularity, quality, novelty, config),
    )
