"""
Tests for coordinate normalization.

Covers grid-relative mapping and every bounding-box fallback rule:
coincident taps, vertical/horizontal lines, minimum dimension, and
aspect correction.

Usage:
    pytest tests/test_normalize.py
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from patternrecon import GridBounds, NormalizedTap, TapPoint, normalize_taps


def taps_from(*points):
    return [TapPoint(x, y) for x, y in points]


def test_grid_relative_divides_by_bounds():
    """Taps are divided by the capture surface size."""
    taps = taps_from((10, 10), (290, 10), (10, 390), (290, 390))
    result = normalize_taps(taps, GridBounds(300, 400))

    assert result[0] == NormalizedTap(x=10 / 300, y=10 / 400)
    assert result[3] == NormalizedTap(x=290 / 300, y=390 / 400)
    assert result[0].x < 0.1 and result[0].y < 0.1
    assert result[3].x > 0.9 and result[3].y > 0.9


def test_grid_relative_keeps_absolute_placement():
    """The same square in different places maps to different regions."""
    square = [(0, 0), (60, 0), (0, 60), (60, 60)]
    top_left = taps_from(*square)
    middle = taps_from(*[(x + 100, y + 150) for x, y in square])
    bounds = GridBounds(300, 400)

    assert normalize_taps(top_left, bounds) != normalize_taps(middle, bounds)
    # Without bounds only the shape survives
    assert normalize_taps(top_left) == normalize_taps(middle)


def test_grid_relative_allows_off_surface_taps():
    """Taps outside the surface are not clamped."""
    result = normalize_taps(taps_from((-30, 0), (330, 800)), GridBounds(300, 400))
    assert result[0].x == pytest.approx(-0.1)
    assert result[1].y == pytest.approx(2.0)


@pytest.mark.parametrize("bounds", [None, GridBounds(0, 400), GridBounds(300, -1)])
def test_unusable_bounds_fall_back_to_bounding_box(bounds):
    """Missing or non-positive bounds use the bounding-box fallback."""
    taps = taps_from((0, 0), (100, 0), (0, 400), (100, 400))
    result = normalize_taps(taps, bounds)
    assert result == normalize_taps(taps)
    assert result[0].x == pytest.approx(1 / 3)
    assert result[1].x == pytest.approx(2 / 3)


def test_coincident_taps_map_to_center():
    """All taps in one spot normalize to exactly (0.5, 0.5)."""
    taps = taps_from(*[(200, 200)] * 4)
    assert normalize_taps(taps) == [NormalizedTap(0.5, 0.5)] * 4


def test_vertical_line():
    """Zero width is widened around the line, then padded to the keypad ratio."""
    taps = taps_from((150, 0), (150, 100), (150, 200), (150, 300))
    result = normalize_taps(taps)

    for point in result:
        assert point.x == pytest.approx(0.5)
    assert [p.y for p in result] == pytest.approx([0, 1 / 3, 2 / 3, 1])


def test_horizontal_line():
    """Zero height is heightened around the line, then padded to the keypad ratio."""
    taps = taps_from((0, 200), (100, 200), (200, 200), (300, 200))
    result = normalize_taps(taps)

    for point in result:
        assert point.y == pytest.approx(0.5)
    assert [p.x for p in result] == pytest.approx([0, 1 / 3, 2 / 3, 1])


def test_minimum_dimension_recenters_thin_box():
    """A box thinner than 10% of its length is widened around its midpoint."""
    taps = taps_from((0, 0), (2, 100), (1, 200), (0, 300))
    result = normalize_taps(taps)

    # Midpoint x = 1 lands in the horizontal center
    assert result[2].x == pytest.approx(0.5)
    for point in result:
        assert abs(point.x - 0.5) < 0.01


def test_wide_box_pads_height():
    """A box wider than 3:4 is padded vertically, centered."""
    taps = taps_from((0, 0), (300, 0), (0, 100), (300, 100))
    result = normalize_taps(taps)

    assert [p.x for p in result] == pytest.approx([0, 1, 0, 1])
    assert [p.y for p in result] == pytest.approx([0.375, 0.375, 0.625, 0.625])


def test_tall_box_pads_width():
    """A box taller than 3:4 is padded horizontally, centered."""
    taps = taps_from((0, 0), (100, 0), (0, 400), (100, 400))
    result = normalize_taps(taps)

    assert [p.x for p in result] == pytest.approx([1 / 3, 2 / 3, 1 / 3, 2 / 3])
    assert [p.y for p in result] == pytest.approx([0, 0, 1, 1])


def test_keypad_shaped_box_is_unchanged():
    """A box already at 3:4 spans the full unit square."""
    taps = taps_from((0, 0), (300, 0), (0, 400), (300, 400))
    result = normalize_taps(taps)
    assert [p.x for p in result] == pytest.approx([0, 1, 0, 1])
    assert [p.y for p in result] == pytest.approx([0, 0, 1, 1])


def test_empty_input():
    assert normalize_taps([]) == []


def test_deterministic():
    taps = taps_from((13, 71), (240, 12), (99, 305), (180, 180))
    assert normalize_taps(taps) == normalize_taps(taps)
