from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .enums import (
    CUISINE_STYLES,
    NO_PREFERENCE,
    Climate,
    Difficulty,
    GrowthHabit,
    HeatCategory,
    PepperType,
    Region,
    WallThickness,
    YieldLevel,
)

NoPreference = Literal["No preference"]

Score = Annotated[int, Field(ge=1, le=10)]


class Item(BaseModel):
    """A single pepper variety from the reference catalog."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str = Field(..., min_length=1)
    alternate_names: str = ""
    species: str = ""
    type: PepperType
    description: str = ""

    heat_shu_min: int = Field(..., ge=0)
    heat_shu_max: int = Field(..., ge=0)
    heat_category: HeatCategory

    sweetness: Score
    fruitiness: Score
    smokiness: Score
    bitterness: Score
    earthiness: Score

    best_uses: tuple[str, ...] = ()
    cuisine_affinity: tuple[str, ...] = ()
    prep_best: tuple[str, ...] = ()

    days_to_maturity_min: int = Field(..., ge=0)
    days_to_maturity_max: int = Field(..., ge=0)
    plant_height_cm_min: int = Field(..., ge=0)
    plant_height_cm_max: int = Field(..., ge=0)
    length_cm_min: int = Field(default=0, ge=0)
    length_cm_max: int = Field(default=0, ge=0)

    growth_habit: GrowthHabit
    yield_level: YieldLevel = YieldLevel.medium
    difficulty: Difficulty
    climate_suitability: Climate
    heat_tolerance: Score
    cold_tolerance: Score

    container_friendly: bool = False
    min_pot_liters: int | None = Field(default=None, ge=1)
    indoor_suitable: bool = False
    greenhouse_recommended: bool = False

    wall_thickness: WallThickness
    color_stages: tuple[str, ...] = ()
    disease_notes: str = ""

    available_from_seedsnow: bool = False
    available_from_west_coast_seeds: bool = False

    @model_validator(mode="after")
    def _check_ranges(self) -> Item:
        for low, high in (
            ("heat_shu_min", "heat_shu_max"),
            ("days_to_maturity_min", "days_to_maturity_max"),
            ("plant_height_cm_min", "plant_height_cm_max"),
            ("length_cm_min", "length_cm_max"),
        ):
            if getattr(self, low) > getattr(self, high):
                raise ValueError(f"{low} must not exceed {high}")
        return self

    @property
    def seeds_available(self) -> bool:
        return self.available_from_seedsnow or self.available_from_west_coast_seeds


class Preferences(BaseModel):
    """User preferences for one search. Every enum field accepts "No preference"."""

    model_config = ConfigDict(frozen=True)

    heat_category: HeatCategory | NoPreference = NO_PREFERENCE
    pepper_type: PepperType | NoPreference = NO_PREFERENCE
    growth_habit: GrowthHabit | NoPreference = NO_PREFERENCE
    climate_suitability: Climate | NoPreference = NO_PREFERENCE
    difficulty: Difficulty | NoPreference = NO_PREFERENCE

    sweetness: int = Field(default=5, ge=1, le=10)
    fruitiness: int = Field(default=5, ge=1, le=10)
    smokiness: int = Field(default=5, ge=1, le=10)

    use_cases: tuple[str, ...] = ()
    cuisine_style: str = NO_PREFERENCE
    container_friendly: Literal["Yes"] | NoPreference = NO_PREFERENCE

    @field_validator("cuisine_style")
    @classmethod
    def _check_cuisine(cls, value: str) -> str:
        value = value.strip() or NO_PREFERENCE
        if value != NO_PREFERENCE and value not in CUISINE_STYLES:
            raise ValueError(f"Unknown cuisine style {value!r}; expected one of {list(CUISINE_STYLES)}")
        return value

    @property
    def wants_container(self) -> bool:
        return self.container_friendly == "Yes"


class SearchProfile(BaseModel):
    """A named preset that pre-populates preferences before the first search."""

    model_config = ConfigDict(frozen=True)

    slug: str = Field(..., min_length=1)
    title: str
    description: str = ""
    preset: dict[str, Any] = Field(default_factory=dict)

    @field_validator("preset")
    @classmethod
    def _known_fields(cls, value: dict[str, Any]) -> dict[str, Any]:
        unknown = set(value) - set(Preferences.model_fields)
        if unknown:
            raise ValueError(f"Unknown preference fields in preset: {sorted(unknown)}")
        return value


class AffiliateLink(BaseModel):
    model_config = ConfigDict(frozen=True)

    vendor: str
    url: str
    region: Region = Region.US
