"""
Recommendation Pipeline Tests

End-to-end over in-memory stores: trust graph -> candidates -> ranking.

Scenarios:
----------
1. Trusted neighbors from the trust graph bias the ranking
2. Anonymous requests get zero social boost
3. Store outages degrade (no social bias / no results) instead of raising
4. City and category filtering at retrieval
5. Immediate variant keeps only places likely open now

Run:
----
    pytest tests/test_pipeline.py -v
"""

from datetime import datetime, timezone
from typing import List, Sequence

import pytest

from recommender import (
    InMemoryPlaceReviewStore,
    PlaceCategory,
    PlaceWithReviews,
    RecommendationConfig,
    RecommendationPipeline,
    StoreUnavailableError,
    TravelPlanQuery,
)
from recommender.stages import get_candidate_pool


class UnavailablePlaceStore:
    def fetch_places_with_reviews(self, city: str, categories: Sequence[PlaceCategory], limit: int) -> List[PlaceWithReviews]:
        raise StoreUnavailableError("place store", "connection refused")


class UnavailableTrustSource:
    def trusted_neighbors(self, user_id: str):
        raise StoreUnavailableError("trust graph", "timeout")


@pytest.fixture
def seeded_store(place_store, make_place, make_reviews):
    """Two restaurants with identical reviews except who wrote them, plus noise."""
    place_store.add_place(make_place("trattoria"))
    place_store.add_place(make_place("osteria"))
    place_store.add_place(make_place("empty-bistro"))
    place_store.add_place(make_place("milan-pizza", city="Milano"))
    place_store.add_place(make_place("night-bar", category="bar"))
    for review in make_reviews("trattoria", 4, rating=4.0, reviewers=["bob", "carol", "x1", "x2"]):
        place_store.add_review(review)
    for review in make_reviews("osteria", 4, rating=4.0, reviewers=["y1", "y2", "y3", "y4"]):
        place_store.add_review(review)
    for review in make_reviews("milan-pizza", 4, rating=5.0):
        place_store.add_review(review)
    for review in make_reviews("night-bar", 3, rating=4.6):
        place_store.add_review(review)
    return place_store


@pytest.fixture
def pipeline(seeded_store, trust_graph):
    return RecommendationPipeline(seeded_store, trust_graph)


def _ids(results) -> List[str]:
    return [r.id for r in results]


class TestPipeline:

    def test_social_bias_reorders(self, pipeline, trust_graph, make_plan, now):
        trust_graph.connect("alice", "bob")
        trust_graph.connect("carol", "alice")
        query = TravelPlanQuery(**make_plan(categories=["restaurant"]))
        results = pipeline.recommend(query, requester_id="alice", now=now)
        assert _ids(results) == ["trattoria", "osteria"]
        top = results[0]
        assert top.trusted_reviewers_count == 2
        assert top.social_trust_boost == pytest.approx(0.25)
        assert results[1].social_trust_boost == 0.0

    def test_anonymous_request_has_no_social_boost(self, pipeline, trust_graph, make_plan, now):
        trust_graph.connect("alice", "bob")
        query = TravelPlanQuery(**make_plan(categories=["restaurant"]))
        for requester in (None, "", "   "):
            results = pipeline.recommend(query, requester_id=requester, now=now)
            assert all(r.social_trust_boost == 0.0 for r in results)

    def test_unreviewed_and_other_city_excluded(self, pipeline, make_plan, now):
        query = TravelPlanQuery(**make_plan(categories=["restaurant"]))
        ids = _ids(pipeline.recommend(query, now=now))
        assert "empty-bistro" not in ids
        assert "milan-pizza" not in ids

    def test_city_override(self, pipeline, make_plan, now):
        query = TravelPlanQuery(**make_plan(categories=["restaurant"], city="milano"))
        assert _ids(pipeline.recommend(query, now=now)) == ["milan-pizza"]

    def test_output_fields(self, pipeline, make_plan, now):
        query = TravelPlanQuery(**make_plan(categories=["restaurant"]))
        result = pipeline.recommend(query, now=now)[0]
        assert result.review_count == 4
        assert result.average_rating == pytest.approx(4.0)
        assert result.verified is False
        assert result.category == PlaceCategory.RESTAURANT
        assert 0.0 <= result.final_ranking_score <= 1.0

    def test_respects_max_results(self, place_store, make_place, make_reviews, trust_graph, make_plan, now):
        for i in range(30):
            place_store.add_place(make_place(f"r{i}"))
            for review in make_reviews(f"r{i}", 2, rating=4.0):
                place_store.add_review(review)
        config = RecommendationConfig(max_results=5, candidate_fetch_limit=10)
        pipeline = RecommendationPipeline(place_store, trust_graph, config)
        query = TravelPlanQuery(**make_plan(categories=["restaurant"]))
        assert len(pipeline.recommend(query, now=now)) == 5
        assert len(get_candidate_pool(query, place_store, config)) == 10


class TestDegradation:

    def test_place_store_outage_returns_empty(self, trust_graph, make_plan, now):
        pipeline = RecommendationPipeline(UnavailablePlaceStore(), trust_graph)
        query = TravelPlanQuery(**make_plan(categories=["restaurant"]))
        assert pipeline.recommend(query, requester_id="alice", now=now) == []

    def test_trust_outage_drops_social_bias(self, seeded_store, make_plan, now):
        pipeline = RecommendationPipeline(seeded_store, UnavailableTrustSource())
        query = TravelPlanQuery(**make_plan(categories=["restaurant"]))
        results = pipeline.recommend(query, requester_id="alice", now=now)
        assert {r.id for r in results} == {"trattoria", "osteria"}
        assert all(r.social_trust_boost == 0.0 for r in results)
        assert pipeline.fetch_trusted_neighbors("alice") == set()


class TestImmediate:

    @pytest.mark.parametrize("hour,expected", [
        (13, {"trattoria", "osteria"}),
        (17, set()),
        (21, {"trattoria", "osteria", "night-bar"}),
    ])
    def test_open_now_filter(self, pipeline, make_plan, hour, expected):
        at = datetime(2026, 6, 15, hour, 0, tzinfo=timezone.utc)
        query = TravelPlanQuery(**make_plan(categories=["restaurant", "bar"], dates={"type": "now"}))
        assert query.is_immediate
        assert {r.id for r in pipeline.recommend_immediate(query, now=at)} == expected

    def test_open_now_preserves_order(self, pipeline, trust_graph, make_plan):
        trust_graph.connect("alice", "bob")
        at = datetime(2026, 6, 15, 13, 0, tzinfo=timezone.utc)
        query = TravelPlanQuery(**make_plan(categories=["restaurant"]))
        assert _ids(pipeline.recommend_immediate(query, requester_id="alice", now=at)) == ["trattoria", "osteria"]
