from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

_BUNDLED_CATALOG = Path(__file__).resolve().parent.parent / "data" / "catalog.csv"


@dataclass(frozen=True)
class CatalogConfig:
    catalog_path: Path = Path(os.getenv("PEPPER_CATALOG_PATH", str(_BUNDLED_CATALOG)))
    list_separator: str = ";"


@dataclass(frozen=True)
class LinksConfig:
    """Referral query strings appended to vendor product URLs."""

    seedsnow_ref: str = os.getenv("SEEDSNOW_REF", "")
    west_coast_seeds_ref: str = os.getenv("WCS_REF", "")


DEFAULT_CATALOG_CONFIG = CatalogConfig()
DEFAULT_LINKS_CONFIG = LinksConfig()
