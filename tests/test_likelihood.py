"""
Tests for the Gaussian digit likelihood model.

Usage:
    pytest tests/test_likelihood.py
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from patternrecon import (
    KEY_CENTERS,
    NormalizedTap,
    analyze_taps,
    get_digit_probabilities,
    get_key_center,
    nearest_digit,
)

SAMPLE_POINTS = [
    NormalizedTap(x / 4, y / 4) for x in range(5) for y in range(5)
] + [NormalizedTap(-1.0, 2.0), NormalizedTap(3.5, -0.7)]


def test_key_center_table():
    """Keys form a 3x3 block with 0 alone below 8."""
    assert get_key_center(1) == NormalizedTap(1 / 6, 1 / 8)
    assert get_key_center(5) == NormalizedTap(3 / 6, 3 / 8)
    assert get_key_center(9) == NormalizedTap(5 / 6, 5 / 8)
    assert get_key_center(0) == NormalizedTap(3 / 6, 7 / 8)
    assert len(KEY_CENTERS) == 10


@pytest.mark.parametrize("point", SAMPLE_POINTS)
def test_probabilities_sum_to_one_and_are_sorted(point):
    probs = get_digit_probabilities(point)

    assert sorted(p.digit for p in probs) == list(range(10))
    assert abs(sum(p.p for p in probs) - 1.0) < 1e-9
    for a, b in zip(probs, probs[1:]):
        assert a.p >= b.p


@pytest.mark.parametrize("digit", range(10))
def test_key_center_is_most_likely_digit(digit):
    probs = get_digit_probabilities(get_key_center(digit))
    assert probs[0].digit == digit
    assert nearest_digit(get_key_center(digit)) == digit


def test_sigma_controls_sharpness():
    """Smaller sigma concentrates mass on the nearest key."""
    point = get_key_center(1)
    sharp = get_digit_probabilities(point, sigma=0.1)[0].p
    default = get_digit_probabilities(point)[0].p
    flat = get_digit_probabilities(point, sigma=1.0)[0].p

    assert sharp > default > flat
    assert flat > 0.1


def test_underflow_falls_back_to_uniform():
    """Every weight underflowing to zero gives 1/10 per digit."""
    probs = get_digit_probabilities(NormalizedTap(100.0, 100.0), sigma=1e-3)

    assert [p.p for p in probs] == [0.1] * 10
    assert [p.digit for p in probs] == list(range(10))


def test_ties_keep_ascending_digit_order():
    """(0.5, 0.5) is equidistant from 5 and 8; 5 comes first."""
    probs = get_digit_probabilities(NormalizedTap(0.5, 0.5))

    assert probs[0].p == probs[1].p
    assert [probs[0].digit, probs[1].digit] == [5, 8]


@pytest.mark.parametrize("sigma", [0, -0.2])
def test_rejects_non_positive_sigma(sigma):
    with pytest.raises(ValueError):
        get_digit_probabilities(NormalizedTap(0.5, 0.5), sigma=sigma)


def test_analyze_taps_numbers_positions():
    taps = [get_key_center(d) for d in (4, 3, 2, 1)]
    analyses = analyze_taps(taps)

    assert [a.position for a in analyses] == [0, 1, 2, 3]
    assert [a.top_digit for a in analyses] == [4, 3, 2, 1]
    assert analyses[0].probability_of(4) == analyses[0].probabilities[0].p
