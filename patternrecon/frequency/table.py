"""
Frequency Table Module - Validated, read-only PIN occurrence counts.
"""

import re
from collections.abc import Mapping
from typing import Dict, Iterator

from .errors import FrequencyDataError, IncompleteTableError

EXPECTED_PIN_COUNT = 10000

PIN_PATTERN = re.compile(r"[0-9]{4}")


def is_valid_pin(pin: str) -> bool:
    """True if pin is exactly 4 ASCII digits."""
    return PIN_PATTERN.fullmatch(pin) is not None


class FrequencyTable(Mapping):
    """
    Immutable mapping from every PIN "0000".."9999" to a count >= 1.

    Construction validates the table, so an instance is always complete.
    Use from_counts() to build one from a plain dict.
    """

    def __init__(self, counts: Dict[str, int]):
        for pin, count in counts.items():
            if not is_valid_pin(pin):
                raise FrequencyDataError(f"Invalid PIN in frequency table: {pin!r}")
            if count < 1:
                raise FrequencyDataError(
                    f"PIN {pin} has count {count}, expected >= 1"
                )
        if len(counts) != EXPECTED_PIN_COUNT:
            raise IncompleteTableError(EXPECTED_PIN_COUNT, len(counts))

        self._counts = dict(counts)
        self._max_count = max(self._counts.values())

    @classmethod
    def from_counts(cls, counts: Dict[str, int]) -> 'FrequencyTable':
        """
        Create a FrequencyTable from a dict of PIN -> count.

        Raises:
            FrequencyDataError: If the dict is not a complete valid table
        """
        return cls(counts)

    def __getitem__(self, pin: str) -> int:
        return self._counts[pin]

    def __iter__(self) -> Iterator[str]:
        return iter(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def __repr__(self) -> str:
        return f"FrequencyTable({len(self)} PINs, max={self._max_count})"

    @property
    def max_count(self) -> int:
        """Largest count in the whole table."""
        return self._max_count

    def most_common(self, n: int = 10):
        """
        Get the n most frequent PINs.

        Returns:
            List of (pin, count) tuples, count descending then PIN ascending
        """
        ranked = sorted(self._counts.items(), key=lambda item: (-item[1], item[0]))
        return ranked[:n]
