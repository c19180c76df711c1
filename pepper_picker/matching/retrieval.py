from __future__ import annotations

import logging
import time
from typing import Sequence

from ..catalog.data_store import get_catalog
from ..catalog.models import Item, Preferences
from .cache import cache_get, cache_set
from .config import DEFAULT_MATCHING_CONFIG, MatchingConfig
from .match import run_matching
from .models import MatchMode, MatchResponse
from .reasons import match_reasons
from .scoring import Scorer, score_soft, score_strict

logger = logging.getLogger(__name__)

SCORERS: dict[str, Scorer] = {
    "search": score_strict,
    "browse": score_soft,
}


def find_matches(
    preferences: Preferences,
    mode: MatchMode = "search",
    items: Sequence[Item] | None = None,
    config: MatchingConfig = DEFAULT_MATCHING_CONFIG,
) -> MatchResponse:
    """
    Rank the catalog for one preference set.

    ``search`` applies the strict scorer (hard filters), ``browse`` the
    soft-only scorer that keeps every variety. Responses for the bundled
    catalog are cached per (mode, preferences); an explicit ``items`` list
    always bypasses the cache.
    """
    start_time = time.time()
    use_cache = config.cache_enabled and items is None

    if use_cache:
        cached = cache_get(mode, preferences, ttl=config.cache_ttl_seconds)
        if cached is not None:
            logger.debug("Cache hit for %s matching", mode)
            return cached

    catalog = list(items) if items is not None else get_catalog()
    matches = run_matching(catalog, preferences, SCORERS[mode], match_reasons)

    response = MatchResponse(
        mode=mode,
        preferences=preferences,
        matches=matches,
        total_candidates=len(catalog),
    )

    if use_cache:
        cache_set(mode, preferences, response)

    elapsed_ms = round((time.time() - start_time) * 1000, 1)
    logger.info(
        "Matched %d of %d varieties (mode=%s) in %.1f ms",
        len(matches), len(catalog), mode, elapsed_ms,
    )
    return response
