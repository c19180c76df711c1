from __future__ import annotations

from fastapi import FastAPI, HTTPException

from .catalog.data_store import get_catalog, get_item
from .catalog.enums import (
    CUISINE_STYLES,
    NO_PREFERENCE,
    USE_CASES,
    Climate,
    Difficulty,
    GrowthHabit,
    HeatCategory,
    PepperType,
)
from .catalog.links import first_valid_link, lookup_links
from .catalog.models import AffiliateLink, Item, Preferences, SearchProfile
from .catalog.presets import SEARCH_PROFILES, apply_preset, get_profile_by_slug
from .guide.formatting import format_heat_level
from .guide.generator import generate_guide
from .guide.models import Guide
from .matching.cache import get_cache_stats
from .matching.models import MatchResponse
from .matching.retrieval import find_matches

app = FastAPI(title="Pepper Picker API", version="1.0.0")


def _require_item(item_id: int) -> Item:
    item = get_item(item_id)
    if item is None:
        raise HTTPException(status_code=404, detail=f"Variety {item_id} not found")
    return item


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metadata")
def metadata() -> dict:
    return {
        "no_preference": NO_PREFERENCE,
        "heat_categories": [c.value for c in HeatCategory],
        "pepper_types": [t.value for t in PepperType],
        "growth_habits": [h.value for h in GrowthHabit],
        "climates": [c.value for c in Climate],
        "difficulties": [d.value for d in Difficulty],
        "use_cases": list(USE_CASES),
        "cuisine_styles": list(CUISINE_STYLES),
    }


# ── Catalog endpoints ────────────────────────────────────────────────────


@app.get("/varieties", response_model=list[Item])
def varieties() -> list[Item]:
    return get_catalog()


@app.get("/varieties/{item_id}")
def variety(item_id: int) -> dict:
    item = _require_item(item_id)
    link = first_valid_link(item.name)
    return {
        "item": item.model_dump(mode="json"),
        "heat_level": format_heat_level(item.heat_shu_min, item.heat_shu_max),
        "buy_link": link.model_dump(mode="json") if link else None,
    }


@app.get("/varieties/{item_id}/guide", response_model=Guide)
def variety_guide(item_id: int) -> Guide:
    return generate_guide(_require_item(item_id))


@app.get("/varieties/{item_id}/links", response_model=list[AffiliateLink])
def variety_links(item_id: int) -> list[AffiliateLink]:
    return lookup_links(_require_item(item_id).name)


# ── Presets ──────────────────────────────────────────────────────────────


@app.get("/presets", response_model=list[SearchProfile])
def presets() -> list[SearchProfile]:
    return SEARCH_PROFILES


@app.get("/presets/{slug}")
def preset(slug: str) -> dict:
    profile = get_profile_by_slug(slug)
    if profile is None:
        raise HTTPException(status_code=404, detail=f"Unknown profile '{slug}'")
    return {
        "profile": profile.model_dump(mode="json"),
        "preferences": apply_preset(profile).model_dump(mode="json"),
    }


# ── Matching ─────────────────────────────────────────────────────────────


@app.post("/match", response_model=MatchResponse)
def match(body: Preferences) -> MatchResponse:
    return find_matches(body, mode="search")


@app.post("/browse", response_model=MatchResponse)
def browse(body: Preferences) -> MatchResponse:
    return find_matches(body, mode="browse")


@app.get("/cache/stats")
def cache_stats() -> dict:
    return get_cache_stats()
