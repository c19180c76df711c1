from __future__ import annotations

from unittest.mock import patch

import pytest
from pydantic import ValidationError

from pepper_picker.catalog.models import Preferences
from pepper_picker.matching.cache import get_cache_stats
from pepper_picker.matching.config import MatchingConfig
from pepper_picker.matching.retrieval import find_matches


def test_search_response_shape():
    response = find_matches(Preferences(heat_category="mild"))
    assert response.mode == "search"
    assert response.total_candidates == 15
    assert all(m.item.heat_category in ("none", "mild", "medium") for m in response.matches)


def test_browse_returns_every_variety():
    response = find_matches(Preferences(heat_category="extreme"), mode="browse")
    assert response.mode == "browse"
    assert len(response.matches) == response.total_candidates == 15


def test_repeated_query_is_served_from_cache():
    prefs = Preferences(use_cases=["salsa"])
    first = find_matches(prefs)
    second = find_matches(prefs)
    assert second is first
    stats = get_cache_stats()
    assert stats["hits"] == 1
    assert stats["misses"] == 1
    assert stats["size"] == 1


def test_modes_are_cached_separately():
    prefs = Preferences()
    find_matches(prefs, mode="search")
    find_matches(prefs, mode="browse")
    assert get_cache_stats()["size"] == 2
    assert get_cache_stats()["hits"] == 0


def test_explicit_items_bypass_cache(make_item):
    response = find_matches(Preferences(), items=[make_item()])
    assert response.total_candidates == 1
    assert get_cache_stats()["size"] == 0


def test_disabled_cache_is_not_touched():
    config = MatchingConfig(cache_enabled=False)
    find_matches(Preferences(), config=config)
    find_matches(Preferences(), config=config)
    assert get_cache_stats() == {"size": 0, "hits": 0, "misses": 0, "hit_rate": 0.0}


def test_expired_entry_is_recomputed():
    config = MatchingConfig(cache_enabled=True, cache_ttl_seconds=60)
    with patch("pepper_picker.matching.cache.time.time", return_value=1000.0):
        first = find_matches(Preferences(), config=config)
    with patch("pepper_picker.matching.cache.time.time", return_value=1100.0):
        second = find_matches(Preferences(), config=config)
    assert second is not first
    assert get_cache_stats()["misses"] == 2


def test_cached_response_cannot_be_corrupted_by_callers():
    prefs = Preferences(heat_category="hot")
    first = find_matches(prefs)
    assert isinstance(first.matches, tuple)
    with pytest.raises(ValidationError):
        first.matches = ()

    second = find_matches(prefs)
    assert second.matches == first.matches
    assert len(second.matches) == 8
