"""
Ranking Functions - Pure re-scoring of spatially ranked candidates.

All functions take candidates as produced by generate_candidates(), i.e.
already sorted by spatial score, and return new PinCandidate lists. None
of them keep state between calls.
"""

import math
from typing import List, Mapping, Sequence

from ..types import PinCandidate

DEFAULT_LIMIT = 10
DEFAULT_FILTER_PCT = 0.25
DEFAULT_SPATIAL_WEIGHT = 0.5


def check_limit(limit: int) -> int:
    """Return limit, raising ValueError unless it is at least 1."""
    if limit < 1:
        raise ValueError(f"limit must be at least 1, got {limit}")
    return limit


def check_spatial_weight(spatial_weight: float) -> float:
    """Return spatial_weight, raising ValueError unless it is in [0, 1]."""
    if not 0.0 <= spatial_weight <= 1.0:
        raise ValueError(f"spatial_weight must be in [0, 1], got {spatial_weight}")
    return spatial_weight


def get_frequency(pin: str, frequency_map: Mapping[str, int]) -> int:
    """Raw occurrence count for a PIN, 0 if the table lacks it."""
    return frequency_map.get(pin, 0)


def normalize_frequency(count: float, max_count: float) -> float:
    """
    Normalize a count relative to a maximum.

    Returns:
        count / max_count, or 0 if max_count <= 0
    """
    if max_count <= 0:
        return 0
    return count / max_count


def rank_by_frequency(pins: Sequence[str], frequency_map: Mapping[str, int]) -> List[PinCandidate]:
    """
    Rank PINs by raw frequency, most common first.

    Returns:
        PinCandidate list with the raw count as score (ties keep input order)
    """
    ranked = [PinCandidate(pin=pin, score=get_frequency(pin, frequency_map)) for pin in pins]
    ranked.sort(key=lambda c: -c.score)
    return ranked


def rank_spatial(candidates: Sequence[PinCandidate], limit: int = DEFAULT_LIMIT) -> List[PinCandidate]:
    """
    List 1: spatial ranking, unchanged apart from truncation.

    Raises:
        ValueError: If limit is less than 1
    """
    check_limit(limit)
    return list(candidates[:limit])


def rank_by_filtered_frequency(
    candidates: Sequence[PinCandidate],
    frequency_map: Mapping[str, int],
    filter_pct: float = DEFAULT_FILTER_PCT,
    limit: int = DEFAULT_LIMIT
) -> List[PinCandidate]:
    """
    List 2: most popular PINs among the spatially plausible ones.

    1. Keep the top ceil(N * filter_pct) candidates by spatial score.
    2. Sort them by raw frequency count, descending.

    The score of each returned candidate is its raw count, not a
    probability. Equal counts keep spatial order.

    Raises:
        ValueError: If filter_pct is not in (0, 1] or limit is less than 1
    """
    if not 0 < filter_pct <= 1:
        raise ValueError(f"filter_pct must be in (0, 1], got {filter_pct}")
    check_limit(limit)

    if not candidates:
        return []

    cutoff = math.ceil(len(candidates) * filter_pct)
    plausible = [c.pin for c in candidates[:cutoff]]
    return rank_by_frequency(plausible, frequency_map)[:limit]


def rank_by_composite(
    candidates: Sequence[PinCandidate],
    frequency_map: Mapping[str, int],
    spatial_weight: float = DEFAULT_SPATIAL_WEIGHT,
    limit: int = DEFAULT_LIMIT
) -> List[PinCandidate]:
    """
    List 3: weighted blend of spatial and frequency evidence.

    1. Normalize spatial scores to [0, 1] against the best candidate.
    2. Normalize counts to [0, 1] against the most frequent candidate
       (not the whole table).
    3. score = w * spatial + (1 - w) * frequency

    Runs over the full candidate set. Ties fall back to spatial score,
    then PIN, so w = 1.0 reproduces the spatial order exactly.

    Args:
        candidates: Spatially ranked candidates
        frequency_map: PIN -> count
        spatial_weight: w in [0, 1]; frequency weight is 1 - w
        limit: Maximum results

    Raises:
        ValueError: If spatial_weight is outside [0, 1] or limit is less than 1
    """
    check_spatial_weight(spatial_weight)
    check_limit(limit)

    if not candidates:
        return []

    frequency_weight = 1.0 - spatial_weight

    max_spatial = max(c.score for c in candidates)
    frequencies = [get_frequency(c.pin, frequency_map) for c in candidates]
    max_frequency = max(frequencies)

    scored = []
    for candidate, count in zip(candidates, frequencies):
        norm_spatial = candidate.score / max_spatial if max_spatial > 0 else 0
        norm_frequency = normalize_frequency(count, max_frequency)
        composite = spatial_weight * norm_spatial + frequency_weight * norm_frequency
        scored.append((composite, candidate.score, candidate.pin))

    scored.sort(key=lambda item: (-item[0], -item[1], item[2]))
    return [PinCandidate(pin=pin, score=composite) for composite, _, pin in scored[:limit]]
