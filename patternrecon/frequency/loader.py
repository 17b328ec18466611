"""
Frequency Loader Module - Parses `PIN,COUNT` text into a FrequencyTable.

Format: one record per line, PIN is exactly 4 ASCII digits, COUNT is a
positive integer, both in ASCII digits with no surrounding whitespace.
Rows with the wrong field count, a malformed PIN or a non-positive COUNT
are skipped. A duplicate PIN or incomplete coverage fails the whole
load; no partial table is ever returned.
"""

import logging
import re
from pathlib import Path
from typing import Dict, Iterable, Optional, Union

from .errors import DuplicatePinError, FrequencyDataError, IncompleteTableError
from .table import EXPECTED_PIN_COUNT, FrequencyTable, is_valid_pin

logger = logging.getLogger(__name__)

COUNT_PATTERN = re.compile(r"[0-9]+")


def _parse_count(text: str) -> Optional[int]:
    """Parse a COUNT field, returning None if not a positive ASCII integer."""
    if COUNT_PATTERN.fullmatch(text) is None:
        return None
    count = int(text)
    return count if count >= 1 else None


def parse_frequency_lines(lines: Iterable[str]) -> FrequencyTable:
    """
    Parse frequency records into a validated table.

    Args:
        lines: Text lines of the form "PIN,COUNT"

    Returns:
        Complete FrequencyTable

    Raises:
        DuplicatePinError: If an accepted PIN appears twice
        IncompleteTableError: If accepted rows do not cover all 10,000 PINs
    """
    counts: Dict[str, int] = {}
    skipped = 0

    for line_no, line in enumerate(lines, 1):
        line = line.rstrip("\r\n")
        if not line.strip():
            continue

        parts = line.split(",")
        if len(parts) != 2:
            skipped += 1
            continue

        pin = parts[0]
        if not is_valid_pin(pin):
            logger.debug(f"Skipping line {line_no}: invalid PIN {pin!r}")
            skipped += 1
            continue

        count = _parse_count(parts[1])
        if count is None:
            logger.debug(f"Skipping line {line_no}: invalid count {parts[1]!r}")
            skipped += 1
            continue

        if pin in counts:
            raise DuplicatePinError(pin)

        counts[pin] = count

    if skipped:
        logger.debug(f"Skipped {skipped} malformed frequency rows")

    if len(counts) != EXPECTED_PIN_COUNT:
        raise IncompleteTableError(EXPECTED_PIN_COUNT, len(counts))

    return FrequencyTable(counts)


def parse_frequency_text(text: str) -> FrequencyTable:
    """Parse a whole frequency document (see parse_frequency_lines)."""
    return parse_frequency_lines(text.splitlines())


def load_frequency_file(path: Union[str, Path]) -> FrequencyTable:
    """
    Load and validate a frequency table from disk.

    Args:
        path: Path to a PIN,COUNT text file

    Returns:
        Complete FrequencyTable

    Raises:
        FrequencyDataError: If the file cannot be read or fails validation
    """
    path = Path(path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            table = parse_frequency_lines(f)
    except OSError as e:
        raise FrequencyDataError(f"Failed to load frequency data from {path}: {e}") from e

    logger.info(f"Loaded {len(table)} PIN frequencies from {path}")
    return table
