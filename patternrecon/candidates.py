"""
Candidate Generator Module - Whole-PIN hypotheses from per-tap distributions.
"""

from itertools import product
from typing import List, Sequence

from .types import PIN_LENGTH, PinCandidate, TapAnalysis

DEFAULT_TOP_K = 4


def generate_candidates(
    analyses: Sequence[TapAnalysis],
    top_k: int = DEFAULT_TOP_K
) -> List[PinCandidate]:
    """
    Generate PIN candidates from the per-tap digit distributions.

    1. Keep the top_k most likely digits for each position.
    2. Enumerate every combination (top_k^4 candidates).
    3. Score each as the product of its digit probabilities (taps are
       treated as independent).
    4. Sort by score descending, ties by PIN ascending.

    Args:
        analyses: Exactly 4 TapAnalysis objects in tap order
        top_k: Digits kept per position

    Returns:
        Ranked candidates, or an empty list if analyses is not 4 long

    Raises:
        ValueError: If top_k is less than 1
    """
    if top_k < 1:
        raise ValueError(f"top_k must be at least 1, got {top_k}")

    if len(analyses) != PIN_LENGTH:
        return []

    top_digits = [analysis.probabilities[:top_k] for analysis in analyses]

    candidates = []
    for combo in product(*top_digits):
        score = 1.0
        for prob in combo:
            score *= prob.p
        pin = "".join(str(prob.digit) for prob in combo)
        candidates.append(PinCandidate(pin=pin, score=score))

    candidates.sort(key=lambda c: (-c.score, c.pin))
    return candidates


def rank_by_heatmap(candidates: List[PinCandidate], limit: int = 10) -> List[PinCandidate]:
    """Spatial ranking: the first `limit` generated candidates."""
    if limit < 1:
        raise ValueError(f"limit must be at least 1, got {limit}")
    return candidates[:limit]
