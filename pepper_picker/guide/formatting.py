from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

from ..catalog.enums import GrowthHabit

LITERS_PER_GALLON = 3.8
CM_PER_INCH = 2.54
DEFAULT_CONTAINER = "5 gallon (19 L)"

_SPACING: dict[GrowthHabit, str] = {
    GrowthHabit.compact: "12-18 inches (30-45 cm)",
    GrowthHabit.tall: "24-30 inches (60-75 cm)",
    GrowthHabit.bushy: "18-24 inches (45-60 cm)",
}


def _round_half_up(value: float, places: int = 0) -> Decimal:
    exponent = Decimal(1).scaleb(-places)
    return Decimal(str(value)).quantize(exponent, rounding=ROUND_HALF_UP)


def container_size(min_pot_liters: int | None) -> str:
    if min_pot_liters is None:
        return DEFAULT_CONTAINER
    gallons = math.ceil(min_pot_liters / LITERS_PER_GALLON)
    return f"{min_pot_liters} L ({gallons} gallon)"


def spacing(habit: GrowthHabit) -> str:
    return _SPACING[GrowthHabit(habit)]


def cm_to_inches(cm: float) -> int:
    return int(_round_half_up(cm / CM_PER_INCH))


def format_shu(value: int) -> str:
    return f"{value:,}"


def _thousands(value: int) -> str:
    return f"{_round_half_up(value / 1_000)}K"


def _millions(value: int) -> str:
    return f"{_round_half_up(value / 1_000_000, 1)}M"


def format_heat_level(shu_min: int, shu_max: int) -> str:
    """Render a Scoville range with a unit and label picked by the upper bound."""
    if shu_max == 0:
        return "No heat"
    if shu_max < 1_000:
        return f"{shu_min}-{shu_max} SHU (Mild)"
    if shu_max < 10_000:
        return f"{_thousands(shu_min)}-{_thousands(shu_max)} SHU (Medium)"
    if shu_max < 100_000:
        return f"{_thousands(shu_min)}-{_thousands(shu_max)} SHU (Hot)"
    if shu_max < 500_000:
        return f"{_thousands(shu_min)}-{_thousands(shu_max)} SHU (Very Hot)"
    return f"{_millions(shu_min)}-{_millions(shu_max)} SHU (Extreme)"
