from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class MatchingConfig:
    cache_enabled: bool = os.getenv("MATCH_CACHE_ENABLED", "true").lower() in ("1", "true", "yes")
    cache_ttl_seconds: float = float(os.getenv("MATCH_CACHE_TTL", "300"))


DEFAULT_MATCHING_CONFIG = MatchingConfig()
