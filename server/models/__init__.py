"""Pydantic request/response models for the API."""

from .connections import (
    ConnectionStatusResponse,
    ConnectionsResponse,
    ConnectRequest,
    TrustLinkResponse,
)
from .recommendations import PlaceCard, RecommendationRequest, RecommendationResponse

__all__ = [
    "ConnectRequest",
    "ConnectionStatusResponse",
    "ConnectionsResponse",
    "PlaceCard",
    "RecommendationRequest",
    "RecommendationResponse",
    "TrustLinkResponse",
]
