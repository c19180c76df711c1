from __future__ import annotations

from ..catalog.enums import NO_PREFERENCE, Difficulty, HeatCategory
from ..catalog.models import Item, Preferences
from .models import MAX_REASONS
from .scoring import FLAVOR_REASON_TOLERANCE, flavor_distance, heat_distance, matching_uses

# Axis values at or above this read as a dominant flavour
STRONG_FLAVOR = 7
# Sweetness at or below this reads as savoury
LOW_SWEETNESS = 3

HEAT_LABELS: dict[HeatCategory, str] = {
    HeatCategory.none: "No heat (perfect for heat-sensitive eaters)",
    HeatCategory.mild: "Mild heat level",
    HeatCategory.medium: "Medium heat - nice kick",
    HeatCategory.hot: "Hot and spicy",
    HeatCategory.very_hot: "Very hot - serious heat",
    HeatCategory.extreme: "Extreme heat - for the brave",
}

USE_CASE_LABELS: dict[str, str] = {
    "fresh_eating": "Great for fresh eating",
    "hot_sauce": "Perfect for hot sauce",
    "salsa": "Ideal for salsa",
    "pickling": "Great for pickling",
    "drying": "Excellent for drying",
    "stuffing": "Perfect for stuffing",
    "fermenting": "Great for fermenting",
    "roasting": "Wonderful roasted",
    "cooking": "Versatile for cooking",
}


def _within(item: Item, prefs: Preferences, axis: str) -> bool:
    return flavor_distance(item, prefs, axis) <= FLAVOR_REASON_TOLERANCE


def _heat_reasons(item: Item, prefs: Preferences) -> list[str]:
    if prefs.heat_category == NO_PREFERENCE:
        return []
    if heat_distance(item.heat_category, prefs.heat_category) != 0:
        return []
    return [HEAT_LABELS[item.heat_category]]


def _flavor_reasons(item: Item, prefs: Preferences) -> list[str]:
    reasons = []
    if _within(item, prefs, "sweetness"):
        if item.sweetness >= STRONG_FLAVOR:
            reasons.append("Sweet flavor profile")
        elif item.sweetness <= LOW_SWEETNESS:
            reasons.append("Savory, not sweet")
    if _within(item, prefs, "fruitiness") and item.fruitiness >= STRONG_FLAVOR:
        reasons.append("Fruity notes")
    if _within(item, prefs, "smokiness") and item.smokiness >= STRONG_FLAVOR:
        reasons.append("Smoky flavor")
    return reasons


def _use_case_reasons(item: Item, prefs: Preferences) -> list[str]:
    matches = matching_uses(item, prefs)
    if not matches:
        return []
    first = matches[0]
    return [USE_CASE_LABELS.get(first, f"Good for {first.replace('_', ' ')}")]


def _growing_reasons(item: Item, prefs: Preferences) -> list[str]:
    reasons = []
    if item.difficulty == Difficulty.beginner:
        reasons.append("Easy to grow")
    if item.container_friendly and prefs.wants_container:
        reasons.append("Container friendly")
    return reasons


def _cuisine_reasons(item: Item, prefs: Preferences) -> list[str]:
    if prefs.cuisine_style != NO_PREFERENCE and prefs.cuisine_style in item.cuisine_affinity:
        return [f"Perfect for {prefs.cuisine_style} cuisine"]
    return []


def _climate_reasons(item: Item, prefs: Preferences) -> list[str]:
    if prefs.climate_suitability != NO_PREFERENCE and item.climate_suitability == prefs.climate_suitability:
        return [f"Well-suited for {item.climate_suitability.value} climates"]
    return []


def _availability_reasons(item: Item, prefs: Preferences) -> list[str]:
    return ["Seeds readily available"] if item.seeds_available else []


# Priority order of reason groups; earlier groups win when the list is capped
REASON_GROUPS = (
    _heat_reasons,
    _flavor_reasons,
    _use_case_reasons,
    _growing_reasons,
    _cuisine_reasons,
    _climate_reasons,
    _availability_reasons,
)


def match_reasons(item: Item, prefs: Preferences) -> list[str]:
    """
    Explain why ``item`` suits ``prefs`` in at most four short phrases.

    Computed independently of scoring so it also works for items the strict
    scorer eliminated (e.g. rows of the browse view).
    """
    reasons: list[str] = []
    for group in REASON_GROUPS:
        reasons.extend(group(item, prefs))
    return reasons[:MAX_REASONS]
