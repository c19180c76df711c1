from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

STAGE_COUNT = 7

PriceTier = Literal["low", "mid", "high"]


class GuideTip(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    is_variety_specific: bool = False


class ProductRecommendation(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    category: str
    name: str
    reason: str
    price_range: str | None = None
    price_tier: PriceTier | None = None
    affiliate_url: str | None = None


class Stage(BaseModel):
    """One lifecycle phase of a guide. ``id`` is stable across generations."""

    model_config = ConfigDict(frozen=True)

    id: str
    stage_number: int = Field(..., ge=1, le=STAGE_COUNT)
    title: str
    subtitle: str
    paragraphs: tuple[str, ...] = ()
    tips: tuple[GuideTip, ...] = ()
    products: tuple[ProductRecommendation, ...] = ()


class Guide(BaseModel):
    model_config = ConfigDict(frozen=True)

    variety_name: str
    stages: tuple[Stage, ...] = Field(..., min_length=STAGE_COUNT, max_length=STAGE_COUNT)
