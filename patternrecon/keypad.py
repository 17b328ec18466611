"""
Keypad Layout Module - Key centers of a standard 3x4 numeric keypad.

Coordinates are normalized to the unit square:
    Columns: 1/6, 3/6, 5/6 (centers of 1/3 widths)
    Rows:    1/8, 3/8, 5/8, 7/8 (centers of 1/4 heights)

    1 2 3
    4 5 6
    7 8 9
      0
"""

from typing import Dict

import numpy as np

from .types import NormalizedTap

# 3 cols / 4 rows
KEYPAD_ASPECT_RATIO = 0.75

DIGITS = tuple(range(10))

# Row i holds the center of digit i
KEY_CENTER_ARRAY = np.array([
    [3 / 6, 7 / 8],    # 0
    [1 / 6, 1 / 8],    # 1
    [3 / 6, 1 / 8],    # 2
    [5 / 6, 1 / 8],    # 3
    [1 / 6, 3 / 8],    # 4
    [3 / 6, 3 / 8],    # 5
    [5 / 6, 3 / 8],    # 6
    [1 / 6, 5 / 8],    # 7
    [3 / 6, 5 / 8],    # 8
    [5 / 6, 5 / 8],    # 9
], dtype=np.float64)
KEY_CENTER_ARRAY.setflags(write=False)

KEY_CENTERS: Dict[int, NormalizedTap] = {
    digit: NormalizedTap(x=float(KEY_CENTER_ARRAY[digit, 0]),
                         y=float(KEY_CENTER_ARRAY[digit, 1]))
    for digit in DIGITS
}


def get_key_center(digit: int) -> NormalizedTap:
    """
    Get the normalized center of a digit key.

    Args:
        digit: Digit 0-9

    Returns:
        Key center in keypad space

    Raises:
        KeyError: If digit is not 0-9
    """
    return KEY_CENTERS[digit]


def nearest_digit(point: NormalizedTap) -> int:
    """Digit whose key center is closest to point (lowest digit on ties)."""
    dist_sq = np.sum((KEY_CENTER_ARRAY - (point.x, point.y)) ** 2, axis=1)
    return int(np.argmin(dist_sq))
