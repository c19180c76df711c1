from __future__ import annotations

from typing import Any, Callable

import pytest

from pepper_picker.catalog.models import Item
from pepper_picker.matching.cache import clear_cache

BASE_ITEM: dict[str, Any] = {
    "id": 1,
    "name": "Test Pepper",
    "type": "jalapeno_type",
    "heat_shu_min": 2500,
    "heat_shu_max": 8000,
    "heat_category": "medium",
    "sweetness": 5,
    "fruitiness": 5,
    "smokiness": 5,
    "bitterness": 3,
    "earthiness": 3,
    "best_uses": ["salsa", "pickling"],
    "cuisine_affinity": ["mexican"],
    "days_to_maturity_min": 70,
    "days_to_maturity_max": 80,
    "plant_height_cm_min": 60,
    "plant_height_cm_max": 90,
    "growth_habit": "bushy",
    "yield_level": "medium",
    "difficulty": "beginner",
    "climate_suitability": "temperate",
    "heat_tolerance": 6,
    "cold_tolerance": 5,
    "container_friendly": True,
    "min_pot_liters": 12,
    "wall_thickness": "medium",
    "color_stages": ["green", "red"],
    "available_from_seedsnow": True,
}


@pytest.fixture
def make_item() -> Callable[..., Item]:
    def _make(**overrides: Any) -> Item:
        return Item.model_validate({**BASE_ITEM, **overrides})

    return _make


@pytest.fixture(autouse=True)
def _fresh_cache():
    clear_cache()
    yield
    clear_cache()
