from __future__ import annotations

from urllib.parse import urlparse

from .config import DEFAULT_LINKS_CONFIG, LinksConfig
from .enums import Region
from .models import AffiliateLink

SEEDSNOW = "SeedsNow"
WEST_COAST_SEEDS = "West Coast Seeds"

_VENDOR_BASE_URLS: dict[str, str] = {
    SEEDSNOW: "https://www.seedsnow.com/products/",
    WEST_COAST_SEEDS: "https://www.westcoastseeds.com/products/",
}

# variety name (or common alias) -> (vendor, product slug)
_PRODUCT_PAGES: dict[str, tuple[str, str]] = {
    "Anaheim": (SEEDSNOW, "pepper-hot-anaheim"),
    "Ancho": (SEEDSNOW, "pepper-hot-ancho-grande"),
    "Ancho Grande": (SEEDSNOW, "pepper-hot-ancho-grande"),
    "Banana Pepper": (SEEDSNOW, "pepper-hot-banana"),
    "Cayenne": (SEEDSNOW, "pepper-hot-cayenne-long-thin-red"),
    "Cherry Pepper": (SEEDSNOW, "pepper-hot-cherry-large-red"),
    "Fresno": (SEEDSNOW, "pepper-fresno-chili"),
    "Habanero": (SEEDSNOW, "pepper-hot-habanero-orange"),
    "Chocolate Habanero": (SEEDSNOW, "pepper-hot-habanero-chocolate-1"),
    "Hungarian Wax": (SEEDSNOW, "pepper-hot-hungarian-wax"),
    "Jalapeño": (SEEDSNOW, "pepper-hot-early-jalapeno"),
    "Poblano": (SEEDSNOW, "pepper-poblano"),
    "Serrano": (SEEDSNOW, "pepper-hot-serrano-tampiqueno"),
    "Tepin": (SEEDSNOW, "pepper-hot-tepin"),
    "Chiltepin": (SEEDSNOW, "pepper-hot-tepin"),
    "California Wonder": (SEEDSNOW, "pepper-sweet-california-wonder"),
    "Bell Pepper": (SEEDSNOW, "pepper-sweet-california-wonder"),
    "Corno di Toro": (SEEDSNOW, "pepper-sweet-corno-di-toro-red"),
    "Marconi Red": (SEEDSNOW, "pepper-sweet-marconi-red"),
    "Pimento": (SEEDSNOW, "pepper-sweet-pimento"),
    "Sweet Banana": (SEEDSNOW, "pepper-sweet-yellow-banana"),
    "Carolina Reaper": (WEST_COAST_SEEDS, "carolina-reaper"),
    "Ghost Pepper": (WEST_COAST_SEEDS, "ghost"),
    "Bhut Jolokia": (WEST_COAST_SEEDS, "ghost"),
    "Scotch Bonnet": (WEST_COAST_SEEDS, "scotch-bonnet"),
    "Trinidad Moruga Scorpion": (WEST_COAST_SEEDS, "trinidad-moruga-scorpion"),
    "Shishito": (WEST_COAST_SEEDS, "shishimai-f1"),
    "Jimmy Nardello": (WEST_COAST_SEEDS, "jimmy-nardello-organic"),
    "Pepperoncini": (WEST_COAST_SEEDS, "pepperoncini"),
    "Purple Beauty": (WEST_COAST_SEEDS, "purple-beauty"),
    "King of the North": (WEST_COAST_SEEDS, "king-of-the-north-organic"),
}


def _referral(vendor: str, config: LinksConfig) -> str:
    if vendor == SEEDSNOW:
        return config.seedsnow_ref
    if vendor == WEST_COAST_SEEDS:
        return config.west_coast_seeds_ref
    return ""


def lookup_links(item_name: str, config: LinksConfig = DEFAULT_LINKS_CONFIG) -> list[AffiliateLink]:
    """Return zero or more vendor links for a variety name. Links are not validated."""
    page = _PRODUCT_PAGES.get(item_name.strip())
    if page is None:
        return []
    vendor, slug = page
    url = f"{_VENDOR_BASE_URLS[vendor]}{slug}{_referral(vendor, config)}"
    return [AffiliateLink(vendor=vendor, url=url, region=Region.US)]


def is_valid_http_url(url: str | None) -> bool:
    if not url:
        return False
    try:
        parsed = urlparse(url)
    except ValueError:
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def first_valid_link(item_name: str, config: LinksConfig = DEFAULT_LINKS_CONFIG) -> AffiliateLink | None:
    for link in lookup_links(item_name, config):
        if is_valid_http_url(link.url):
            return link
    return None
