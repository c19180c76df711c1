from __future__ import annotations

from enum import Enum

NO_PREFERENCE = "No preference"
WILDCARD_CUISINE = "global"


class HeatCategory(str, Enum):
    none = "none"
    mild = "mild"
    medium = "medium"
    hot = "hot"
    very_hot = "very_hot"
    extreme = "extreme"


class Difficulty(str, Enum):
    beginner = "beginner"
    intermediate = "intermediate"
    advanced = "advanced"


class PepperType(str, Enum):
    bell = "bell"
    cayenne_type = "cayenne_type"
    habanero_type = "habanero_type"
    jalapeno_type = "jalapeno_type"
    thai_type = "thai_type"
    ornamental = "ornamental"
    other = "other"


class GrowthHabit(str, Enum):
    bushy = "bushy"
    tall = "tall"
    compact = "compact"


class Climate(str, Enum):
    cool = "cool"
    temperate = "temperate"
    hot = "hot"


class WallThickness(str, Enum):
    thin = "thin"
    medium = "medium"
    thick = "thick"


class YieldLevel(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"


class Region(str, Enum):
    US = "US"
    EU = "EU"


USE_CASES: tuple[str, ...] = (
    "hot_sauce",
    "pickling",
    "salsa",
    "fermenting",
    "stuffing",
    "fresh_eating",
    "drying",
    "roasting",
    "cooking",
    "ornamental",
    "jerk",
    "challenges",
    "novelty",
    "marinade",
    "curry_paste",
    "seafood",
    "jelly",
    "gourmet",
    "finishing",
    "canning",
)

# Cuisine styles offered as a preference; item affinities may be more specific.
CUISINE_STYLES: tuple[str, ...] = (
    WILDCARD_CUISINE,
    "mexican",
    "caribbean",
    "korean",
    "thai",
    "indian",
    "mediterranean",
)
