from __future__ import annotations

from dataclasses import dataclass

from ..catalog.enums import Climate, Difficulty, GrowthHabit, HeatCategory, WallThickness, YieldLevel
from ..catalog.models import Item
from .formatting import cm_to_inches, container_size, format_shu, spacing

SUPERHOT = (HeatCategory.very_hot, HeatCategory.extreme)
LONG_SEASON_DAYS = 90
VERY_LONG_SEASON_DAYS = 100
HEAT_HARDY = 8
COLD_SENSITIVE = 3
NEEDS_COLD_PROTECTION = 4
COLD_HARDY = 7
DEFAULT_RIPE_COLOR = "red"


def has_best_use(item: Item, use: str) -> bool:
    needle = use.lower()
    return any(needle in candidate.lower() for candidate in item.best_uses)


@dataclass(frozen=True)
class VarietyTraits:
    """Facts the stage builders branch on, derived once per item."""

    name: str
    is_compact: bool
    is_tall: bool
    is_superhot: bool
    is_beginner: bool
    is_advanced: bool
    is_container_friendly: bool
    is_indoor_suitable: bool
    wants_greenhouse: bool
    wants_hot_climate: bool
    is_heat_hardy: bool
    is_cold_sensitive: bool
    needs_cold_protection: bool
    is_cold_hardy: bool
    is_thick_walled: bool
    is_thin_walled: bool
    is_heavy_yielder: bool
    good_for_drying: bool
    wants_dehydrator: bool
    good_for_sauce: bool
    avg_maturity: int
    maturity_range: str
    needs_early_start: bool
    weeks_indoor: str
    container_size: str
    spacing: str
    height_cm: str
    height_in: str
    final_color: str
    color_progression: str
    heat_range: str
    disease_notes: str

    @classmethod
    def from_item(cls, item: Item) -> VarietyTraits:
        avg_maturity = (item.days_to_maturity_min + item.days_to_maturity_max + 1) // 2
        colors = item.color_stages or (DEFAULT_RIPE_COLOR,)
        return cls(
            name=item.name,
            is_compact=item.growth_habit == GrowthHabit.compact,
            is_tall=item.growth_habit == GrowthHabit.tall,
            is_superhot=item.heat_category in SUPERHOT,
            is_beginner=item.difficulty == Difficulty.beginner,
            is_advanced=item.difficulty == Difficulty.advanced,
            is_container_friendly=item.container_friendly,
            is_indoor_suitable=item.indoor_suitable,
            wants_greenhouse=item.greenhouse_recommended,
            wants_hot_climate=item.climate_suitability == Climate.hot,
            is_heat_hardy=item.heat_tolerance >= HEAT_HARDY,
            is_cold_sensitive=item.cold_tolerance <= COLD_SENSITIVE,
            needs_cold_protection=item.cold_tolerance <= NEEDS_COLD_PROTECTION,
            is_cold_hardy=item.cold_tolerance >= COLD_HARDY,
            is_thick_walled=item.wall_thickness == WallThickness.thick,
            is_thin_walled=item.wall_thickness == WallThickness.thin,
            is_heavy_yielder=item.yield_level == YieldLevel.high,
            good_for_drying=has_best_use(item, "drying"),
            wants_dehydrator=has_best_use(item, "drying") or has_best_use(item, "powdered"),
            good_for_sauce=has_best_use(item, "hot_sauce") or has_best_use(item, "fermenting"),
            avg_maturity=avg_maturity,
            maturity_range=f"{item.days_to_maturity_min}-{item.days_to_maturity_max}",
            needs_early_start=avg_maturity > VERY_LONG_SEASON_DAYS,
            weeks_indoor="10-12" if avg_maturity > LONG_SEASON_DAYS else "8-10",
            container_size=container_size(item.min_pot_liters),
            spacing=spacing(item.growth_habit),
            height_cm=f"{item.plant_height_cm_min}-{item.plant_height_cm_max}",
            height_in=f"{cm_to_inches(item.plant_height_cm_min)}-{cm_to_inches(item.plant_height_cm_max)}",
            final_color=colors[-1],
            color_progression=" → ".join(colors),
            heat_range=f"{format_shu(item.heat_shu_min)} to {format_shu(item.heat_shu_max)}",
            disease_notes=item.disease_notes.strip(),
        )
