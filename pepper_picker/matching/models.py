from __future__ import annotations

from enum import Enum
from typing import Literal, NamedTuple

from pydantic import BaseModel, ConfigDict, Field

from ..catalog.models import Item, Preferences

MAX_REASONS = 4

MatchMode = Literal["search", "browse"]


class ScoreResult(NamedTuple):
    score: float
    max_score: float


class MatchTier(str, Enum):
    top = "Top match"
    good = "Good match"
    wildcard = "Wildcard"


class ScoredItem(BaseModel):
    """An Item plus the derived fields of one matching run."""

    model_config = ConfigDict(frozen=True)

    item: Item
    score: float
    max_score: float
    percentage: float = Field(..., ge=0.0, le=100.0)
    tier: MatchTier
    reasons: tuple[str, ...] = Field(default=(), max_length=MAX_REASONS)


class MatchResponse(BaseModel):
    """Ranked result of one matching run."""

    model_config = ConfigDict(frozen=True)

    mode: MatchMode
    preferences: Preferences
    matches: tuple[ScoredItem, ...]
    total_candidates: int
