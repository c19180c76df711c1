from __future__ import annotations

from .models import Preferences, SearchProfile

SEARCH_PROFILES: list[SearchProfile] = [
    SearchProfile(
        slug="mild-peppers-for-beginners",
        title="Best Mild Peppers for Beginners",
        description="Easy-to-grow mild peppers perfect for new gardeners",
        preset={"heat_category": "mild", "difficulty": "beginner"},
    ),
    SearchProfile(
        slug="hot-sauce-peppers",
        title="Best Peppers for Hot Sauce",
        description="Top pepper varieties for making homemade hot sauce",
        preset={"use_cases": ["hot_sauce"], "heat_category": "hot"},
    ),
    SearchProfile(
        slug="container-peppers",
        title="Best Peppers for Containers",
        description="Compact pepper varieties perfect for pots and small spaces",
        preset={"container_friendly": "Yes"},
    ),
    SearchProfile(
        slug="sweet-peppers",
        title="Best Sweet Peppers",
        description="Delicious sweet peppers with no heat",
        preset={"heat_category": "none", "sweetness": 8},
    ),
    SearchProfile(
        slug="mexican-cuisine-peppers",
        title="Best Peppers for Mexican Cooking",
        description="Authentic peppers for Mexican and Tex-Mex dishes",
        preset={"cuisine_style": "mexican"},
    ),
    SearchProfile(
        slug="asian-cuisine-peppers",
        title="Best Peppers for Asian Cooking",
        description="Peppers perfect for Thai, Korean, and Chinese dishes",
        preset={"cuisine_style": "thai"},
    ),
    SearchProfile(
        slug="super-hot-peppers",
        title="World's Hottest Peppers",
        description="Extreme heat peppers for the brave",
        preset={"heat_category": "extreme"},
    ),
    SearchProfile(
        slug="stuffing-peppers",
        title="Best Peppers for Stuffing",
        description="Large, thick-walled peppers perfect for stuffing",
        preset={"use_cases": ["stuffing"]},
    ),
    SearchProfile(
        slug="pickling-peppers",
        title="Best Peppers for Pickling",
        description="Top varieties for pickled peppers and preserves",
        preset={"use_cases": ["pickling"]},
    ),
    SearchProfile(
        slug="salsa-peppers",
        title="Best Peppers for Salsa",
        description="Perfect peppers for fresh and cooked salsas",
        preset={"use_cases": ["salsa"]},
    ),
]


def get_profile_by_slug(slug: str) -> SearchProfile | None:
    for profile in SEARCH_PROFILES:
        if profile.slug == slug:
            return profile
    return None


def apply_preset(profile: SearchProfile, base: Preferences | None = None) -> Preferences:
    """Shallow-override ``base`` (default preferences) with the profile's preset."""
    merged = (base or Preferences()).model_dump()
    merged.update(profile.preset)
    return Preferences.model_validate(merged)
