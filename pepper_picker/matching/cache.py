"""
Result cache for matching runs.

Matching is a pure function of (mode, preferences) over a static catalog, so a
response can be reused for identical preference sets until it expires.
"""
from __future__ import annotations

import hashlib
import json
import time
from typing import Any

from ..catalog.models import Preferences
from .models import MatchMode, MatchResponse

_cache: dict[str, dict[str, Any]] = {}
_hits: int = 0
_misses: int = 0


def _make_key(mode: MatchMode, preferences: Preferences) -> str:
    payload = {"mode": mode, "preferences": preferences.model_dump(mode="json")}
    normalized = json.dumps(payload, sort_keys=True)
    return hashlib.sha256(normalized.encode()).hexdigest()[:16]


def cache_get(mode: MatchMode, preferences: Preferences, ttl: float) -> MatchResponse | None:
    global _hits, _misses
    key = _make_key(mode, preferences)
    entry = _cache.get(key)
    if entry and time.time() - entry["created_at"] < ttl:
        _hits += 1
        return entry["response"]
    if entry:
        del _cache[key]
    _misses += 1
    return None


def cache_set(mode: MatchMode, preferences: Preferences, response: MatchResponse) -> None:
    _cache[_make_key(mode, preferences)] = {"response": response, "created_at": time.time()}


def get_cache_stats() -> dict:
    total = _hits + _misses
    return {
        "size": len(_cache),
        "hits": _hits,
        "misses": _misses,
        "hit_rate": round(_hits / total * 100, 1) if total > 0 else 0.0,
    }


def clear_cache() -> None:
    global _hits, _misses
    _cache.clear()
    _hits = 0
    _misses = 0
