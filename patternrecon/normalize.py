"""
Coordinate Normalizer Module - Maps raw taps into keypad space.

Two modes:
    - Grid-relative (preferred): divide by the capture surface size. Keeps
      absolute placement, so the same shape traced in different parts of
      the keypad lands on different keys.
    - Bounding-box (fallback): scale the taps' own bounding box, padded to
      the keypad aspect ratio. Only relative placement survives, so
      1235 and 4568 normalize identically.
"""

import logging
from typing import List, Optional, Sequence

from .keypad import KEYPAD_ASPECT_RATIO
from .types import GridBounds, NormalizedTap, TapPoint

logger = logging.getLogger(__name__)

# Smallest allowed ratio between the short and long side of the box
MIN_DIMENSION_RATIO = 0.1


def normalize_taps(
    taps: Sequence[TapPoint],
    bounds: Optional[GridBounds] = None
) -> List[NormalizedTap]:
    """
    Normalize a sequence of taps to the [0, 1] keypad space.

    Args:
        taps: Raw taps in chronological order
        bounds: Capture surface size at first tap; None or non-positive
            dimensions select the bounding-box fallback

    Returns:
        One NormalizedTap per input tap (empty for empty input)
    """
    if not taps:
        return []

    if bounds is not None and bounds.is_usable:
        return [
            NormalizedTap(x=tap.x / bounds.width, y=tap.y / bounds.height)
            for tap in taps
        ]

    logger.debug("No usable capture bounds, using bounding-box normalization")
    return normalize_by_bounding_box(taps)


def normalize_by_bounding_box(taps: Sequence[TapPoint]) -> List[NormalizedTap]:
    """
    Normalize taps relative to their own bounding box.

    Degenerate boxes are widened before the box is padded to the keypad
    aspect ratio (width / height = 0.75).

    Args:
        taps: Raw taps (at least one)

    Returns:
        Normalized taps in input order
    """
    min_x = min(tap.x for tap in taps)
    max_x = max(tap.x for tap in taps)
    min_y = min(tap.y for tap in taps)
    max_y = max(tap.y for tap in taps)

    width = max_x - min_x
    height = max_y - min_y

    # All taps in one spot
    if width == 0 and height == 0:
        return [NormalizedTap(x=0.5, y=0.5) for _ in taps]

    # Vertical line
    if width == 0:
        target_width = height * MIN_DIMENSION_RATIO
        min_x -= target_width / 2
        width = target_width

    # Horizontal line
    if height == 0:
        target_height = width * MIN_DIMENSION_RATIO
        min_y -= target_height / 2
        height = target_height

    if width < height * MIN_DIMENSION_RATIO:
        target_width = height * MIN_DIMENSION_RATIO
        center = min_x + width / 2
        min_x = center - target_width / 2
        width = target_width

    if height < width * MIN_DIMENSION_RATIO:
        target_height = width * MIN_DIMENSION_RATIO
        center = min_y + height / 2
        min_y = center - target_height / 2
        height = target_height

    if width / height > KEYPAD_ASPECT_RATIO:
        # Too wide: pad height
        target_height = width / KEYPAD_ASPECT_RATIO
        min_y -= (target_height - height) / 2
        height = target_height
    else:
        # Too tall: pad width
        target_width = height * KEYPAD_ASPECT_RATIO
        min_x -= (target_width - width) / 2
        width = target_width

    return [
        NormalizedTap(x=(tap.x - min_x) / width, y=(tap.y - min_y) / height)
        for tap in taps
    ]
