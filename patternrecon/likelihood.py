"""
Digit Likelihood Module - Gaussian kernel over the keypad key centers.
"""

from typing import List, Sequence

import numpy as np

from .keypad import KEY_CENTER_ARRAY
from .types import DigitProbability, NormalizedTap, TapAnalysis

DEFAULT_SIGMA = 0.35


def get_digit_probabilities(
    tap: NormalizedTap,
    sigma: float = DEFAULT_SIGMA
) -> List[DigitProbability]:
    """
    Compute the probability of each digit for a normalized tap.

    Each digit gets weight exp(-d^2 / (2 * sigma^2)) where d is the distance
    from the tap to the digit's key center. Weights are normalized to sum
    to 1.0; if they all underflow to zero the distribution is uniform.

    Args:
        tap: Normalized tap position
        sigma: Kernel spread. Smaller values sharpen the peak at the
            nearest key, larger values flatten the distribution.

    Returns:
        10 DigitProbability objects sorted by probability descending,
        ties in ascending digit order

    Raises:
        ValueError: If sigma is not positive
    """
    if sigma <= 0:
        raise ValueError(f"sigma must be positive, got {sigma}")

    dist_sq = np.sum((KEY_CENTER_ARRAY - (tap.x, tap.y)) ** 2, axis=1)
    raw = np.exp(-dist_sq / (2 * sigma * sigma))
    total = raw.sum()

    if total > 0:
        probs = raw / total
    else:
        probs = np.full(len(raw), 1.0 / len(raw))

    # Stable sort on negated probabilities keeps ascending digit order on ties
    order = np.argsort(-probs, kind="stable")
    return [DigitProbability(digit=int(d), p=float(probs[d])) for d in order]


def analyze_taps(
    taps: Sequence[NormalizedTap],
    sigma: float = DEFAULT_SIGMA
) -> List[TapAnalysis]:
    """
    Build a TapAnalysis for each normalized tap.

    Args:
        taps: Normalized taps in chronological order
        sigma: Kernel spread passed to get_digit_probabilities

    Returns:
        One TapAnalysis per tap, position = index
    """
    return [
        TapAnalysis(position=index,
                    probabilities=tuple(get_digit_probabilities(tap, sigma)))
        for index, tap in enumerate(taps)
    ]
