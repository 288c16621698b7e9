"""Root and health endpoints."""

from fastapi import APIRouter

from recommender.catalog import enum_values
from recommender.models.place import PlaceCategory
from recommender.models.plan import DestinationArea, TravelType

from ..state import get_state

router = APIRouter()


@router.get("/")
def root():
    state = get_state()
    return {
        "name": "Travel Place Recommendation API",
        "version": "1.0.0",
        "data_source": state.config.data_source,
        "catalog": {
            "categories": enum_values(PlaceCategory),
            "destination_areas": enum_values(DestinationArea),
            "travel_types": enum_values(TravelType),
        },
        "endpoints": {
            "recommendations": ["/api/recommendations", "/api/recommendations/immediate"],
            "connections": [
                "/api/connections",
                "/api/connections/{user_id}",
                "/api/connections/{user_id}/status/{target_id}",
            ],
            "config": ["/api/config/scoring"],
        },
    }


@router.get("/api/health")
def health():
    state = get_state()
    return {
        "status": "healthy",
        "place_store": type(state.place_store).__name__,
        "trust_store": type(state.trust_store).__name__,
    }
