"""Configuration endpoints: active scoring configuration."""

from fastapi import APIRouter

from ..state import get_state

router = APIRouter()


@router.get("/scoring")
def get_scoring_config():
    """Weights, thresholds and caps the ranking pipeline is running with."""
    config = get_state().recommendation_config
    return {
        "weights": config.weights(),
        "config": config.model_dump(),
    }
