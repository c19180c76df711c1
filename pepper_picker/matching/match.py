from __future__ import annotations

from typing import Callable, Iterable

from ..catalog.models import Item, Preferences
from .models import MatchTier, ScoredItem
from .scoring import Scorer

Reasoner = Callable[[Item, Preferences], list[str]]

TOP_MATCH_THRESHOLD = 80.0
GOOD_MATCH_THRESHOLD = 65.0


def tier_for_percentage(percentage: float) -> MatchTier:
    if percentage >= TOP_MATCH_THRESHOLD:
        return MatchTier.top
    if percentage >= GOOD_MATCH_THRESHOLD:
        return MatchTier.good
    return MatchTier.wildcard


def run_matching(
    items: Iterable[Item],
    preferences: Preferences,
    scorer: Scorer,
    reasoner: Reasoner,
) -> list[ScoredItem]:
    """
    Score every item, drop eliminated ones and rank the rest.

    Survivors are sorted by raw score, highest first. Items with equal score
    keep their catalog order.
    """
    scored: list[ScoredItem] = []
    for item in items:
        result = scorer(item, preferences)
        if result is None:
            continue
        percentage = result.score / result.max_score * 100
        scored.append(
            ScoredItem(
                item=item,
                score=result.score,
                max_score=result.max_score,
                percentage=percentage,
                tier=tier_for_percentage(percentage),
                reasons=tuple(reasoner(item, preferences)),
            )
        )
    return sorted(scored, key=lambda s: s.score, reverse=True)
