"""Travel plan query: the input supplied by the planning wizard."""

from datetime import date
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from .place import PlaceCategory


class TravelType(str, Enum):
    SOLO = "solo"
    DATE = "date"
    FAMILY = "family"
    FRIENDS = "friends"
    BUSINESS = "business"


class DestinationArea(str, Enum):
    TRENTO_CITY = "trento-city"
    HISTORIC_VILLAGES = "historic-villages"
    NATURE_EASY = "nature-easy"
    NATURE_HIKE = "nature-hike"


class DateMode(str, Enum):
    NOW = "now"
    CUSTOM = "custom"


class TravelDates(BaseModel):
    type: DateMode = DateMode.CUSTOM
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    is_flexible: bool = False


class TravelPlanQuery(BaseModel):
    """
    What the traveler asked for.

    categories: explicit category filter; None (or empty) means resolve from the area.
    destination_area: free string; known values map to DestinationArea, anything else
        falls back to the default category set.
    experience_tags: tags the traveler wants (1-3 in the wizard, not enforced here).
    city: city to search; None means RecommendationConfig.default_city.
    """

    categories: Optional[List[PlaceCategory]] = None
    destination_area: str
    experience_tags: List[str] = Field(default_factory=list)
    travel_type: TravelType
    city: Optional[str] = None
    dates: TravelDates = Field(default_factory=TravelDates)

    @field_validator("categories")
    @classmethod
    def empty_categories_mean_unset(cls, value):
        if not value:
            return None
        # Dedupe, keep first-seen order
        return list(dict.fromkeys(value))

    @field_validator("experience_tags")
    @classmethod
    def strip_tags(cls, value):
        return [t.strip() for t in value if t and t.strip()]

    @property
    def is_immediate(self) -> bool:
        """True when the traveler wants places open right now."""
        return self.dates.type == DateMode.NOW
