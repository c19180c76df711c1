from __future__ import annotations

import pytest

from pepper_picker.guide.formatting import (
    cm_to_inches,
    container_size,
    format_heat_level,
    format_shu,
    spacing,
)


@pytest.mark.parametrize(
    "liters, expected",
    [
        (None, "5 gallon (19 L)"),
        (12, "12 L (4 gallon)"),
        (8, "8 L (3 gallon)"),
        (6, "6 L (2 gallon)"),
    ],
)
def test_container_size(liters, expected):
    assert container_size(liters) == expected


@pytest.mark.parametrize(
    "shu_min, shu_max, expected",
    [
        (0, 0, "No heat"),
        (50, 200, "50-200 SHU (Mild)"),
        (2500, 8000, "3K-8K SHU (Medium)"),
        (1000, 1000, "1K-1K SHU (Medium)"),
        (10000, 30000, "10K-30K SHU (Hot)"),
        (100000, 350000, "100K-350K SHU (Very Hot)"),
        (855000, 1041427, "0.9M-1.0M SHU (Extreme)"),
        (1400000, 2200000, "1.4M-2.2M SHU (Extreme)"),
    ],
)
def test_format_heat_level(shu_min, shu_max, expected):
    assert format_heat_level(shu_min, shu_max) == expected


def test_heat_label_follows_upper_bound():
    assert format_heat_level(500, 999).endswith("(Mild)")
    assert format_heat_level(500, 500_000).endswith("(Extreme)")


def test_format_shu_groups_thousands():
    assert format_shu(1041427) == "1,041,427"
    assert format_shu(0) == "0"


def test_cm_to_inches_rounds():
    assert cm_to_inches(45) == 18
    assert cm_to_inches(60) == 24
    assert cm_to_inches(90) == 35


def test_spacing_by_habit():
    assert spacing("compact") == "12-18 inches (30-45 cm)"
    assert spacing("bushy") == "18-24 inches (45-60 cm)"
    assert spacing("tall") == "24-30 inches (60-75 cm)"
