from __future__ import annotations

import pytest
from pydantic import ValidationError

from pepper_picker.catalog.data_store import get_catalog, get_item
from pepper_picker.guide.generator import STAGE_BUILDERS, generate_guide
from pepper_picker.guide.models import Guide
from pepper_picker.guide.products import PRODUCT_CATALOG, UnknownProductError, get_product
from pepper_picker.guide.traits import VarietyTraits

STAGE_IDS = [
    "seed-starting",
    "growing-environment",
    "transplanting",
    "support-training",
    "feeding-care",
    "pest-disease",
    "harvesting",
]


def _stage(guide, stage_id):
    return next(s for s in guide.stages if s.id == stage_id)


def _specific_tips(stage):
    return [tip.text for tip in stage.tips if tip.is_variety_specific]


def _product_ids(stage):
    return [p.id for p in stage.products]


# ── Structure ────────────────────────────────────────────────────────────


@pytest.mark.parametrize("item", get_catalog(), ids=lambda i: i.name)
def test_every_variety_gets_seven_ordered_stages(item):
    guide = generate_guide(item)
    assert guide.variety_name == item.name
    assert [s.id for s in guide.stages] == STAGE_IDS
    assert [s.stage_number for s in guide.stages] == list(range(1, 8))
    for stage in guide.stages:
        assert stage.paragraphs
        assert stage.tips
        assert stage.products
        assert all(p.id in PRODUCT_CATALOG for p in stage.products)


def test_generation_is_deterministic(make_item):
    item = make_item()
    assert generate_guide(item) == generate_guide(item)


def test_stages_are_independent(make_item):
    item = make_item(heat_category="extreme", growth_habit="tall")
    guide = generate_guide(item)
    for build, stage in zip(STAGE_BUILDERS, guide.stages):
        assert build(item) == stage


def test_guide_rejects_wrong_stage_count(make_item):
    stages = generate_guide(make_item()).stages
    with pytest.raises(ValidationError):
        Guide(variety_name="Test Pepper", stages=stages[:6])


# ── Variety-specific content ─────────────────────────────────────────────


class TestSeedStarting:
    def test_standard_season(self, make_item):
        stage = _stage(generate_guide(make_item()), "seed-starting")
        assert stage.subtitle == "Start indoors 8-10 weeks before last frost"
        assert "Test Pepper is beginner-friendly" in _specific_tips(stage)[0]
        assert "grow_light_premium" not in _product_ids(stage)

    def test_superhot_long_season(self, make_item):
        item = make_item(
            heat_category="extreme",
            heat_shu_min=1_400_000,
            heat_shu_max=2_200_000,
            difficulty="advanced",
            days_to_maturity_min=100,
            days_to_maturity_max=120,
        )
        stage = _stage(generate_guide(item), "seed-starting")
        assert stage.subtitle == "Start indoors 10-12 weeks before last frost"
        assert _specific_tips(stage) == [
            "Test Pepper can take 2-6 weeks to germinate, which is normal for superhots.",
            "Start early: Test Pepper needs 100-120 days to mature.",
        ]
        assert _product_ids(stage)[-1] == "grow_light_premium"


class TestGrowingEnvironment:
    def test_container_variety(self, make_item):
        stage = _stage(generate_guide(make_item(min_pot_liters=12)), "growing-environment")
        assert stage.subtitle == "Container growing in 12 L (4 gallon)+ pots"
        assert "Test Pepper needs at least a 12 L (4 gallon) container." in _specific_tips(stage)
        assert _product_ids(stage) == ["container_5gal", "self_watering_pot", "potting_mix", "mulch"]

    def test_missing_pot_size_uses_default(self, make_item):
        stage = _stage(generate_guide(make_item(min_pot_liters=None)), "growing-environment")
        assert "Test Pepper needs at least a 5 gallon (19 L) container." in _specific_tips(stage)

    def test_in_ground_greenhouse_variety(self, make_item):
        item = make_item(container_friendly=False, greenhouse_recommended=True, growth_habit="tall")
        stage = _stage(generate_guide(item), "growing-environment")
        assert stage.subtitle == "Greenhouse or raised bed growing"
        assert "Space Test Pepper plants 24-30 inches (60-75 cm) apart." in _specific_tips(stage)
        assert _product_ids(stage) == ["raised_bed_kit", "garden_soil", "soil_test_kit", "greenhouse_kit", "mulch"]

    def test_indoor_variety_gets_grow_light(self, make_item):
        stage = _stage(generate_guide(make_item(indoor_suitable=True)), "growing-environment")
        assert "grow_light_premium" in _product_ids(stage)


class TestSupportTraining:
    def test_tall_variety_is_staked(self, make_item):
        item = make_item(growth_habit="tall", plant_height_cm_min=90, plant_height_cm_max=120)
        stage = _stage(generate_guide(item), "support-training")
        assert stage.subtitle == "Tall plants need staking at transplanting time"
        assert "90-120 cm (35-47 inches)" in stage.paragraphs[0]
        assert _product_ids(stage) == ["plant_stakes", "pruning_shears", "garden_twine"]

    def test_compact_variety(self, make_item):
        stage = _stage(generate_guide(make_item(growth_habit="compact")), "support-training")
        assert stage.subtitle == "Compact plants need minimal support"
        assert _product_ids(stage) == ["garden_twine"]

    def test_heavy_yield_paragraph(self, make_item):
        stage = _stage(generate_guide(make_item(yield_level="high")), "support-training")
        assert any("heavy producer" in p for p in stage.paragraphs)


class TestFeedingAndPests:
    def test_thick_walls_get_calcium(self, make_item):
        stage = _stage(generate_guide(make_item(wall_thickness="thick")), "feeding-care")
        assert "calcium_supplement" in _product_ids(stage)
        assert any("blossom end rot" in tip for tip in _specific_tips(stage))

    def test_in_ground_variety_gets_drip_irrigation(self, make_item):
        stage = _stage(generate_guide(make_item(container_friendly=False)), "feeding-care")
        assert _product_ids(stage) == ["pepper_fertilizer", "drip_irrigation_kit"]

    def test_disease_notes_are_quoted(self, make_item):
        stage = _stage(generate_guide(make_item(disease_notes="Watch for mosaic virus.")), "pest-disease")
        assert "Growing note for Test Pepper: Watch for mosaic virus." in stage.paragraphs

    def test_cold_sensitive_variety_gets_row_covers(self, make_item):
        guide = generate_guide(make_item(cold_tolerance=2))
        assert "row_covers" in _product_ids(_stage(guide, "pest-disease"))
        assert "row_covers" in _product_ids(_stage(guide, "transplanting"))


class TestHarvesting:
    def test_subtitle_and_color_tip(self, make_item):
        stage = _stage(generate_guide(make_item()), "harvesting")
        assert stage.subtitle == "First fruit at ~75 days, color stages: green → red"
        assert "Wait for full red color for maximum flavor and heat." in _specific_tips(stage)

    def test_missing_color_stages_default_to_red(self, make_item):
        stage = _stage(generate_guide(make_item(color_stages=[])), "harvesting")
        assert "Wait for full red color for maximum flavor and heat." in _specific_tips(stage)

    def test_superhot_handling_warning(self):
        reaper = get_item(4)
        stage = _stage(generate_guide(reaper), "harvesting")
        assert any(p.startswith("Handling warning: Carolina Reaper ranges from 1,400,000 to 2,200,000 SHU") for p in stage.paragraphs)
        assert _product_ids(stage) == ["harvest_basket", "dehydrator", "compost_bin"]

    def test_no_dehydrator_without_drying_use(self, make_item):
        stage = _stage(generate_guide(make_item(best_uses=["salsa"])), "harvesting")
        assert _product_ids(stage) == ["harvest_basket", "compost_bin"]


# ── Traits and products ──────────────────────────────────────────────────


def test_traits_average_maturity_rounds_up(make_item):
    traits = VarietyTraits.from_item(make_item(days_to_maturity_min=70, days_to_maturity_max=75))
    assert traits.avg_maturity == 73


def test_powdered_use_gets_dehydrator_without_drying_paragraph(make_item):
    item = make_item(best_uses=["powdered"])
    traits = VarietyTraits.from_item(item)
    assert traits.wants_dehydrator
    assert not traits.good_for_drying

    stage = _stage(generate_guide(item), "harvesting")
    assert _product_ids(stage) == ["harvest_basket", "dehydrator", "compost_bin"]
    assert not any("excellent for drying" in p for p in stage.paragraphs)


def test_heat_range_uses_grouped_shu(make_item):
    traits = VarietyTraits.from_item(make_item(heat_shu_min=855000, heat_shu_max=1041427))
    assert traits.heat_range == "855,000 to 1,041,427"


def test_get_product_attaches_reason():
    product = get_product("heat_mat", "Warm soil.")
    assert product.reason == "Warm soil."
    assert product.category == "seed-starting"
    assert product.affiliate_url is None


def test_unknown_product_raises():
    with pytest.raises(UnknownProductError):
        get_product("flamethrower", "No.")
