"""Recommendation endpoints: ranked places for a travel plan (and an open-now variant)."""

import asyncio
import logging
from datetime import datetime

from fastapi import APIRouter

from recommender.stages import filter_open_now

from ..models import RecommendationRequest, RecommendationResponse
from ..state import get_state
from ..utils import to_place_cards

logger = logging.getLogger(__name__)

router = APIRouter()


async def _recommend(request: RecommendationRequest, immediate: bool) -> RecommendationResponse:
    """Fetch trusted neighbors and candidates concurrently, then rank (and filter open-now)."""
    pipeline = get_state().pipeline
    query = request.travel_plan
    trusted, places = await asyncio.gather(
        asyncio.to_thread(pipeline.fetch_trusted_neighbors, request.user_id),
        asyncio.to_thread(pipeline.fetch_candidates, query),
    )
    # Local wall clock: open-hours are local, novelty is tz-aware
    now = datetime.now().astimezone()
    recs = pipeline.rank(query, places, trusted, now) if places else []
    if immediate:
        recs = filter_open_now(recs, now)
    logger.info(
        "[api] %d recommendations (immediate=%s, social_bias=%s)",
        len(recs), immediate, bool(trusted),
    )
    cards = to_place_cards(recs)
    return RecommendationResponse(
        success=True,
        recommendations=cards,
        count=len(cards),
        social_bias_enabled=bool(trusted),
    )


@router.post("", response_model=RecommendationResponse)
async def recommend(request: RecommendationRequest):
    """Ranked places. A plan with dates.type == 'now' is served open-now filtered."""
    return await _recommend(request, immediate=request.travel_plan.is_immediate)


@router.post("/immediate", response_model=RecommendationResponse)
async def recommend_immediate(request: RecommendationRequest):
    """Ranked places likely open right now."""
    return await _recommend(request, immediate=True)
