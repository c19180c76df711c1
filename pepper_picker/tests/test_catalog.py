from __future__ import annotations

import pandas as pd
import pytest
from pydantic import ValidationError

from pepper_picker.catalog.config import DEFAULT_CATALOG_CONFIG, CatalogConfig
from pepper_picker.catalog.data_store import CatalogError, get_item, load_catalog
from pepper_picker.catalog.enums import NO_PREFERENCE
from pepper_picker.catalog.models import Item, Preferences


def _write_variant(tmp_path, **changes):
    df = pd.read_csv(DEFAULT_CATALOG_CONFIG.catalog_path, dtype={"alternate_names": str})
    for column, value in changes.items():
        df[column] = df[column].astype(object)
        df.loc[0, column] = value
    path = tmp_path / "catalog.csv"
    df.to_csv(path, index=False)
    return CatalogConfig(catalog_path=path)


# ── Loading ──────────────────────────────────────────────────────────────


class TestLoadCatalog:
    def test_bundled_catalog(self):
        items = load_catalog()
        assert len(items) == 15
        assert len({i.id for i in items}) == 15
        assert items[0].name == "California Wonder"

    def test_list_and_bool_columns_are_parsed(self):
        jalapeno = get_item(2)
        assert jalapeno.best_uses[:2] == ("salsa", "pickling")
        assert jalapeno.cuisine_affinity == ("mexican", "southwestern", "american")
        assert jalapeno.container_friendly is True
        assert jalapeno.min_pot_liters == 12
        assert jalapeno.seeds_available

    def test_missing_optional_values_use_defaults(self):
        reaper = get_item(4)
        assert reaper.min_pot_liters is None
        assert reaper.container_friendly is False
        assert get_item(12).alternate_names == ""

    def test_unknown_item(self):
        assert get_item(999) is None

    def test_invalid_enum_is_rejected(self, tmp_path):
        config = _write_variant(tmp_path, heat_category="scorching")
        with pytest.raises(CatalogError, match="California Wonder"):
            load_catalog(config)

    def test_inverted_range_is_rejected(self, tmp_path):
        config = _write_variant(tmp_path, days_to_maturity_min=90, days_to_maturity_max=60)
        with pytest.raises(CatalogError):
            load_catalog(config)

    def test_duplicate_ids_are_rejected(self, tmp_path):
        config = _write_variant(tmp_path, id=2)
        with pytest.raises(CatalogError, match="unique"):
            load_catalog(config)


# ── Models ───────────────────────────────────────────────────────────────


def test_item_is_immutable(make_item):
    item = make_item()
    with pytest.raises(ValidationError):
        item.name = "Other"


def test_flavor_score_out_of_range(make_item):
    with pytest.raises(ValidationError):
        make_item(sweetness=11)


def test_preferences_defaults():
    prefs = Preferences()
    assert prefs.heat_category == NO_PREFERENCE
    assert prefs.sweetness == prefs.fruitiness == prefs.smokiness == 5
    assert prefs.use_cases == ()
    assert not prefs.wants_container


def test_preferences_reject_unknown_category():
    with pytest.raises(ValidationError):
        Preferences(heat_category="spicy")


def test_blank_cuisine_means_no_preference():
    assert Preferences(cuisine_style="  ").cuisine_style == NO_PREFERENCE


def test_item_requires_core_fields():
    with pytest.raises(ValidationError):
        Item.model_validate({"id": 1, "name": "Nameless"})


def test_known_cuisine_is_accepted():
    assert Preferences(cuisine_style=" mexican ").cuisine_style == "mexican"


@pytest.mark.parametrize("cuisine", ["Mexican", "mexico", "martian"])
def test_unknown_cuisine_is_rejected(cuisine):
    with pytest.raises(ValidationError):
        Preferences(cuisine_style=cuisine)
