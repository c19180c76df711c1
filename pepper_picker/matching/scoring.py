"""
Per-item scoring functions.

Both scorers honour the same contract, ``score(item, preferences)`` returning a
``ScoreResult`` or ``None`` when the item is eliminated, so the matching
driver can run either one unchanged.

* ``score_strict`` treats heat, type, container-friendliness and difficulty as
  hard filters and awards bonus points when they match.
* ``score_soft`` never eliminates. Every criterion is scored proportionally so
  the browse view always covers the full catalog.

Criteria the user left at "No preference" add nothing to ``max_score``. The
flavour sliders and vendor availability always count, and ``max_score`` is
clamped up to ``MIN_MAX_SCORE`` so percentages stay meaningful.
"""
from __future__ import annotations

from typing import Callable

from ..catalog.enums import NO_PREFERENCE, WILDCARD_CUISINE, Climate, Difficulty, HeatCategory
from ..catalog.models import Item, Preferences
from .models import ScoreResult

Scorer = Callable[[Item, Preferences], ScoreResult | None]

HEAT_ORDER: dict[HeatCategory, int] = {
    HeatCategory.none: 0,
    HeatCategory.mild: 1,
    HeatCategory.medium: 2,
    HeatCategory.hot: 3,
    HeatCategory.very_hot: 4,
    HeatCategory.extreme: 5,
}

DIFFICULTY_ORDER: dict[Difficulty, int] = {
    Difficulty.beginner: 0,
    Difficulty.intermediate: 1,
    Difficulty.advanced: 2,
}

FLAVOR_AXES = ("sweetness", "fruitiness", "smokiness")

HEAT_POINTS = 15
HEAT_ADJACENT_POINTS = 8
HEAT_SOFT_STEP = 5
MAX_HEAT_DISTANCE = 1
TYPE_POINTS = 10
CONTAINER_POINTS = 10
DIFFICULTY_POINTS = 10
DIFFICULTY_HARDER_POINTS = 5
FLAVOR_POINTS = 10
USE_CASE_POINTS = 15
CUISINE_POINTS = 10
GROWTH_HABIT_POINTS = 10
CLIMATE_POINTS = 15
CLIMATE_ADAPTABLE_POINTS = 8
AVAILABILITY_POINTS = 5

# Flavour sliders plus availability
MIN_MAX_SCORE = FLAVOR_POINTS * len(FLAVOR_AXES) + AVAILABILITY_POINTS

# Reasons call a flavour axis a match within this distance
FLAVOR_REASON_TOLERANCE = 2

ADAPTABLE_CLIMATE = Climate.temperate


def heat_index(category: HeatCategory) -> int:
    return HEAT_ORDER[HeatCategory(category)]


def difficulty_index(difficulty: Difficulty) -> int:
    return DIFFICULTY_ORDER[Difficulty(difficulty)]


def heat_distance(a: HeatCategory, b: HeatCategory) -> int:
    return abs(heat_index(a) - heat_index(b))


def flavor_distance(item: Item, prefs: Preferences, axis: str) -> int:
    return abs(getattr(item, axis) - getattr(prefs, axis))


def _flavor_points(item: Item, prefs: Preferences) -> float:
    return sum(max(0, FLAVOR_POINTS - flavor_distance(item, prefs, axis)) for axis in FLAVOR_AXES)


def matching_uses(item: Item, prefs: Preferences) -> list[str]:
    return [use for use in prefs.use_cases if use in item.best_uses]


def _use_case_points(item: Item, prefs: Preferences) -> float:
    matches = matching_uses(item, prefs)
    return min(USE_CASE_POINTS, len(matches) / len(prefs.use_cases) * USE_CASE_POINTS)


def cuisine_matches(item: Item, cuisine: str) -> bool:
    return cuisine in item.cuisine_affinity or WILDCARD_CUISINE in item.cuisine_affinity


def _climate_points(item: Item, prefs: Preferences) -> float:
    if item.climate_suitability == prefs.climate_suitability:
        return CLIMATE_POINTS
    if item.climate_suitability == ADAPTABLE_CLIMATE:
        return CLIMATE_ADAPTABLE_POINTS
    return 0


def _difficulty_points(item_level: int, pref_level: int) -> float:
    if item_level <= pref_level:
        return DIFFICULTY_POINTS
    if item_level == pref_level + 1:
        return DIFFICULTY_HARDER_POINTS
    return 0


def _shared_soft_criteria(item: Item, prefs: Preferences) -> ScoreResult:
    """Criteria scored identically by both scorers."""
    score = _flavor_points(item, prefs)
    max_score = FLAVOR_POINTS * len(FLAVOR_AXES)

    if prefs.use_cases:
        max_score += USE_CASE_POINTS
        score += _use_case_points(item, prefs)

    if prefs.cuisine_style != NO_PREFERENCE:
        max_score += CUISINE_POINTS
        if cuisine_matches(item, prefs.cuisine_style):
            score += CUISINE_POINTS

    if prefs.growth_habit != NO_PREFERENCE:
        max_score += GROWTH_HABIT_POINTS
        if item.growth_habit == prefs.growth_habit:
            score += GROWTH_HABIT_POINTS

    if prefs.climate_suitability != NO_PREFERENCE:
        max_score += CLIMATE_POINTS
        score += _climate_points(item, prefs)

    max_score += AVAILABILITY_POINTS
    if item.seeds_available:
        score += AVAILABILITY_POINTS

    return ScoreResult(score, max_score)


def _finish(score: float, max_score: float) -> ScoreResult:
    return ScoreResult(score, max(max_score, MIN_MAX_SCORE))


def score_strict(item: Item, prefs: Preferences) -> ScoreResult | None:
    score = 0.0
    max_score = 0.0

    if prefs.heat_category != NO_PREFERENCE:
        distance = heat_distance(item.heat_category, prefs.heat_category)
        if distance > MAX_HEAT_DISTANCE:
            return None
        max_score += HEAT_POINTS
        score += HEAT_POINTS if distance == 0 else HEAT_ADJACENT_POINTS

    if prefs.pepper_type != NO_PREFERENCE:
        if item.type != prefs.pepper_type:
            return None
        max_score += TYPE_POINTS
        score += TYPE_POINTS

    if prefs.wants_container:
        if not item.container_friendly:
            return None
        max_score += CONTAINER_POINTS
        score += CONTAINER_POINTS

    if prefs.difficulty != NO_PREFERENCE:
        item_level = difficulty_index(item.difficulty)
        pref_level = difficulty_index(prefs.difficulty)
        if item_level > pref_level + 1:
            return None
        max_score += DIFFICULTY_POINTS
        score += _difficulty_points(item_level, pref_level)

    shared = _shared_soft_criteria(item, prefs)
    return _finish(score + shared.score, max_score + shared.max_score)


def score_soft(item: Item, prefs: Preferences) -> ScoreResult:
    score = 0.0
    max_score = 0.0

    if prefs.heat_category != NO_PREFERENCE:
        distance = heat_distance(item.heat_category, prefs.heat_category)
        max_score += HEAT_POINTS
        score += max(0, HEAT_POINTS - distance * HEAT_SOFT_STEP)

    if prefs.pepper_type != NO_PREFERENCE:
        max_score += TYPE_POINTS
        if item.type == prefs.pepper_type:
            score += TYPE_POINTS

    if prefs.wants_container:
        max_score += CONTAINER_POINTS
        if item.container_friendly:
            score += CONTAINER_POINTS

    if prefs.difficulty != NO_PREFERENCE:
        max_score += DIFFICULTY_POINTS
        score += _difficulty_points(difficulty_index(item.difficulty), difficulty_index(prefs.difficulty))

    shared = _shared_soft_criteria(item, prefs)
    return _finish(score + shared.score, max_score + shared.max_score)
