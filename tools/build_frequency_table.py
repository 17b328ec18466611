#!/usr/bin/env python3
"""
Synthetic frequency table builder.

Writes a complete PIN,COUNT table (all 10,000 PINs, every count >= 1)
for local experimentation when the real-world dataset is not available.
Counts are heuristic: repeated digits, runs, doubled pairs, years,
calendar dates and straight lines on the keypad score higher, mirroring
how people actually pick PINs.

Usage:
    python build_frequency_table.py [output_path]

Examples:
    python build_frequency_table.py                        # data/pin-frequency.csv
    python build_frequency_table.py /tmp/pin-frequency.csv
"""

import sys
from itertools import product
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from patternrecon.frequency import load_frequency_file


DEFAULT_OUTPUT = Path("./data/pin-frequency.csv")

BASE_COUNT = 20
SAME_DIGIT_BONUS = 2000
RUN_BONUS = 3000
PAIR_REPEAT_BONUS = 800
DOUBLE_PAIR_BONUS = 500
YEAR_BONUS = 400
DATE_BONUS = 150
KEYPAD_PATTERN_BONUS = 600

# Corner and straight-line shapes traced on the 3x4 keypad
KEYPAD_PATTERNS = {
    "1379", "1397", "7931", "9713",
    "2580", "0852", "1470", "3690",
    "1590", "3570", "7531", "9510",
}


def is_run(digits) -> bool:
    """True for 0123, 1234, ... and 9876, 8765, ..."""
    steps = {b - a for a, b in zip(digits, digits[1:])}
    return steps == {1} or steps == {-1}


def is_date(first: int, second: int) -> bool:
    """True if first/second form a plausible month/day pair."""
    return 1 <= first <= 12 and 1 <= second <= 31


def score_pin(pin: str) -> int:
    """
    Heuristic popularity of a PIN.

    Args:
        pin: 4-digit string

    Returns:
        Positive synthetic count
    """
    digits = [int(ch) for ch in pin]
    count = BASE_COUNT

    if len(set(digits)) == 1:
        count += SAME_DIGIT_BONUS
    if is_run(digits):
        count += RUN_BONUS
    if pin[:2] == pin[2:]:
        count += PAIR_REPEAT_BONUS
    if pin[0] == pin[1] and pin[2] == pin[3]:
        count += DOUBLE_PAIR_BONUS

    year = int(pin)
    if 1940 <= year <= 2025:
        count += YEAR_BONUS

    head, tail = int(pin[:2]), int(pin[2:])
    if is_date(head, tail) or is_date(tail, head):
        count += DATE_BONUS

    if pin in KEYPAD_PATTERNS:
        count += KEYPAD_PATTERN_BONUS

    # Fewer distinct digits are easier to remember
    count += (4 - len(set(digits))) * 10

    # Slight preference for PINs starting with low digits
    count -= digits[0]

    return max(1, count)


def build_table():
    """Score every PIN 0000-9999 in ascending order."""
    pins = ["".join(p) for p in product("0123456789", repeat=4)]
    return [(pin, score_pin(pin)) for pin in pins]


def write_table(rows, output: Path) -> None:
    """Write PIN,COUNT rows to output."""
    output.parent.mkdir(parents=True, exist_ok=True)
    with open(output, 'w', encoding='utf-8') as f:
        for pin, count in rows:
            f.write(f"{pin},{count}\n")


def main():
    output = Path(sys.argv[1]) if len(sys.argv) > 1 else DEFAULT_OUTPUT

    rows = build_table()
    write_table(rows, output)

    # Round-trip through the real loader to catch mistakes early
    table = load_frequency_file(output)
    print(f"Wrote {len(table)} PINs to {output}")
    print("Most common:")
    for pin, count in table.most_common(5):
        print(f"  {pin}: {count}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
