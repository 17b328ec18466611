"""
Frequency Package - Real-world PIN popularity reference.

Usage:
    from patternrecon.frequency import FrequencyTableCache

    cache = FrequencyTableCache("data/pin-frequency.csv")
    table = cache.get()          # loads and validates once
    table["1234"]                # occurrence count

    cache.inject(test_table)     # bypass loading in tests
    cache.reset()                # force reload on next get()
"""

from .errors import DuplicatePinError, FrequencyDataError, IncompleteTableError
from .table import EXPECTED_PIN_COUNT, FrequencyTable, is_valid_pin
from .loader import load_frequency_file, parse_frequency_lines, parse_frequency_text
from .cache import FrequencyTableCache

__all__ = [
    "FrequencyDataError",
    "DuplicatePinError",
    "IncompleteTableError",
    "EXPECTED_PIN_COUNT",
    "FrequencyTable",
    "is_valid_pin",
    "load_frequency_file",
    "parse_frequency_lines",
    "parse_frequency_text",
    "FrequencyTableCache",
]
