"""
Place and review models: read-only inputs supplied by the place/review store.

Built from store dicts via Place.model_validate(d) / Review.model_validate(d).
Review.ratings is kept loose (Dict[str, Any]) so malformed rating values survive
parsing and are skipped per review during signal extraction.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class PlaceCategory(str, Enum):
    """Closed set of place categories."""

    # Food & drink
    RESTAURANT = "restaurant"
    BAR = "bar"
    COFFEE_SHOP = "coffee-shop"
    FAST_FOOD = "fast-food"

    # Accommodation
    HOTEL = "hotel"
    HOSTEL = "hostel"
    VACATION_RENTAL = "vacation-rental"

    # Entertainment
    CLUB = "club"
    THEATER = "theater"
    MUSIC_VENUE = "music-venue"

    # Culture & history
    MUSEUM = "museum"
    HISTORICAL_SITE = "historical-site"
    RELIGIOUS_SITE = "religious-site"

    # Nature & outdoors
    PARK = "park"
    BEACH = "beach"
    HIKING_TRAIL = "hiking-trail"
    VIEWPOINT = "viewpoint"

    # Activities
    ADVENTURE_ACTIVITY = "adventure-activity"
    WATER_ACTIVITY = "water-activity"
    SPORTS_FACILITY = "sports-facility"

    # Services
    SHOPPING = "shopping"
    SPA_WELLNESS = "spa-wellness"
    TRANSPORT_HUB = "transport-hub"

    # Other
    ATTRACTION = "attraction"
    EVENT_VENUE = "event-venue"


class Coordinates(BaseModel):
    latitude: float
    longitude: float


class Place(BaseModel):
    """
    A place owned by the place collaborator.

    Extra store columns (photo_urls, website, ...) are allowed and carried through.
    """

    model_config = ConfigDict(extra="allow")

    id: str
    name: str
    category: PlaceCategory
    city: str
    coordinates: Optional[Coordinates] = None
    address: Optional[str] = None
    description: Optional[str] = None
    working_hours: Optional[str] = None
    verified: bool = False
    created_at: Optional[datetime] = None


class Review(BaseModel):
    """
    One review of a place.

    reviewer_id: may be missing for legacy/anonymous reviews (not counted as a reviewer).
    ratings: dimension -> score (1..5); values are validated during signal extraction.
    experience_tags: tags the reviewer attached to their visit.
    """

    model_config = ConfigDict(extra="allow")

    place_id: str = ""
    reviewer_id: Optional[str] = None
    ratings: Dict[str, Any] = Field(default_factory=dict)
    experience_tags: List[str] = Field(default_factory=list)
    comment: Optional[str] = None


class PlaceWithReviews(BaseModel):
    """A place joined with all of its reviews, as returned by the store."""

    place: Place
    reviews: List[Review] = Field(default_factory=list)
