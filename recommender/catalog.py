"""
Closed lookup tables keyed by the domain enums.

- AREA_CATEGORIES: destination area -> categories searched for that area
- TRAVEL_TYPE_TAGS: travel type -> contextual experience tags
- OPEN_HOURS: category -> hour windows when the place is likely open

Every table must cover every member of its enum; _assert_exhaustive runs at
import time so a new enum member without a table entry fails loudly.
"""

from typing import Dict, List, Mapping, Optional, Tuple

from .models.place import PlaceCategory
from .models.plan import DestinationArea, TravelType

DEFAULT_CATEGORIES: Tuple[PlaceCategory, ...] = (
    PlaceCategory.RESTAURANT,
    PlaceCategory.BAR,
    PlaceCategory.COFFEE_SHOP,
    PlaceCategory.MUSEUM,
    PlaceCategory.PARK,
    PlaceCategory.ATTRACTION,
)

AREA_CATEGORIES: Dict[DestinationArea, Tuple[PlaceCategory, ...]] = {
    DestinationArea.TRENTO_CITY: (
        PlaceCategory.RESTAURANT,
        PlaceCategory.BAR,
        PlaceCategory.COFFEE_SHOP,
        PlaceCategory.FAST_FOOD,
        PlaceCategory.MUSEUM,
        PlaceCategory.THEATER,
        PlaceCategory.MUSIC_VENUE,
        PlaceCategory.HISTORICAL_SITE,
        PlaceCategory.SHOPPING,
        PlaceCategory.HOTEL,
        PlaceCategory.PARK,
        PlaceCategory.HIKING_TRAIL,
        PlaceCategory.VIEWPOINT,
        PlaceCategory.ADVENTURE_ACTIVITY,
        PlaceCategory.SPORTS_FACILITY,
        PlaceCategory.SPA_WELLNESS,
    ),
    DestinationArea.HISTORIC_VILLAGES: (
        PlaceCategory.HISTORICAL_SITE,
        PlaceCategory.RELIGIOUS_SITE,
        PlaceCategory.MUSEUM,
        PlaceCategory.RESTAURANT,
        PlaceCategory.COFFEE_SHOP,
        PlaceCategory.HOTEL,
        PlaceCategory.ATTRACTION,
    ),
    DestinationArea.NATURE_EASY: (
        PlaceCategory.PARK,
        PlaceCategory.VIEWPOINT,
        PlaceCategory.BEACH,
        PlaceCategory.HIKING_TRAIL,
        PlaceCategory.COFFEE_SHOP,
        PlaceCategory.RESTAURANT,
    ),
    DestinationArea.NATURE_HIKE: (
        PlaceCategory.HIKING_TRAIL,
        PlaceCategory.VIEWPOINT,
        PlaceCategory.ADVENTURE_ACTIVITY,
        PlaceCategory.PARK,
        PlaceCategory.ATTRACTION,
    ),
}

TRAVEL_TYPE_TAGS: Dict[TravelType, Tuple[str, ...]] = {
    TravelType.SOLO: ("solo-friendly", "authentic-local", "cultural-immersion"),
    TravelType.DATE: ("romantic", "intimate", "scenic-beauty"),
    TravelType.FAMILY: ("family-friendly", "crowd-level-low", "budget-friendly"),
    TravelType.FRIENDS: ("friends-group", "energetic", "crowd-level-high"),
    TravelType.BUSINESS: ("luxury", "quick-visit", "central-location"),
}

# Any of these in the preferred tags marks the query as broad.
BROAD_MARKER_TAGS = frozenset({"popular", "highly-rated", "authentic-local"})

ALWAYS_OPEN: Tuple[Tuple[int, int], ...] = ((0, 23),)
NEVER_OPEN: Tuple[Tuple[int, int], ...] = ()

# Inclusive hour windows (local time).
OPEN_HOURS: Dict[PlaceCategory, Tuple[Tuple[int, int], ...]] = {
    PlaceCategory.PARK: ALWAYS_OPEN,
    PlaceCategory.VIEWPOINT: ALWAYS_OPEN,
    PlaceCategory.HIKING_TRAIL: ALWAYS_OPEN,
    PlaceCategory.COFFEE_SHOP: ((7, 20),),
    PlaceCategory.RESTAURANT: ((12, 15), (19, 23)),
    PlaceCategory.BAR: ((18, 23),),
    PlaceCategory.MUSEUM: ((9, 18),),
    PlaceCategory.THEATER: ((9, 18),),
    PlaceCategory.SHOPPING: ((9, 18),),
    PlaceCategory.FAST_FOOD: NEVER_OPEN,
    PlaceCategory.HOTEL: NEVER_OPEN,
    PlaceCategory.HOSTEL: NEVER_OPEN,
    PlaceCategory.VACATION_RENTAL: NEVER_OPEN,
    PlaceCategory.CLUB: NEVER_OPEN,
    PlaceCategory.MUSIC_VENUE: NEVER_OPEN,
    PlaceCategory.HISTORICAL_SITE: NEVER_OPEN,
    PlaceCategory.RELIGIOUS_SITE: NEVER_OPEN,
    PlaceCategory.BEACH: NEVER_OPEN,
    PlaceCategory.ADVENTURE_ACTIVITY: NEVER_OPEN,
    PlaceCategory.WATER_ACTIVITY: NEVER_OPEN,
    PlaceCategory.SPORTS_FACILITY: NEVER_OPEN,
    PlaceCategory.SPA_WELLNESS: NEVER_OPEN,
    PlaceCategory.TRANSPORT_HUB: NEVER_OPEN,
    PlaceCategory.ATTRACTION: NEVER_OPEN,
    PlaceCategory.EVENT_VENUE: NEVER_OPEN,
}


def _assert_exhaustive(table: Mapping, enum_cls: type, name: str) -> None:
    missing = [m.value for m in enum_cls if m not in table]
    if missing:
        raise RuntimeError(f"{name} is missing entries for: {missing}")


_assert_exhaustive(AREA_CATEGORIES, DestinationArea, "AREA_CATEGORIES")
_assert_exhaustive(TRAVEL_TYPE_TAGS, TravelType, "TRAVEL_TYPE_TAGS")
_assert_exhaustive(OPEN_HOURS, PlaceCategory, "OPEN_HOURS")


def parse_area(area: str) -> Optional[DestinationArea]:
    """DestinationArea for a raw area string, or None when unrecognized."""
    try:
        return DestinationArea((area or "").strip().lower())
    except ValueError:
        return None


def categories_for_area(area: str) -> Optional[List[PlaceCategory]]:
    """Categories for a known area; None for an unrecognized one."""
    parsed = parse_area(area)
    if parsed is None:
        return None
    return list(AREA_CATEGORIES[parsed])


def contextual_tags(travel_type: TravelType) -> List[str]:
    return list(TRAVEL_TYPE_TAGS[travel_type])


def is_open_at(category: PlaceCategory, hour: int) -> bool:
    """True if places of this category are likely open at the given hour (0-23)."""
    return any(start <= hour <= end for start, end in OPEN_HOURS[category])


def enum_values(enum_cls: type) -> List[str]:
    return [m.value for m in enum_cls]
