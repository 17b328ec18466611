"""
Tests for frequency table parsing, validation and caching.

Usage:
    pytest tests/test_frequency.py
"""

import sys
from pathlib import Path

import pytest

# Add project root and tests dir to path
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent))

from frequency_data import build_frequency_map, frequency_lines
from patternrecon.frequency import (
    DuplicatePinError,
    FrequencyDataError,
    FrequencyTable,
    FrequencyTableCache,
    IncompleteTableError,
    load_frequency_file,
    parse_frequency_lines,
    parse_frequency_text,
)


def test_parses_complete_table():
    table = parse_frequency_lines(frequency_lines(build_frequency_map()))

    assert len(table) == 10000
    assert table["1234"] == 10000
    assert table["0005"] == 95
    assert table.max_count == 10000
    assert table.most_common(2) == [("1234", 10000), ("1111", 8000)]


def test_missing_row_fails_with_expected_count():
    lines = frequency_lines(build_frequency_map())[:-1]

    with pytest.raises(IncompleteTableError, match="10000") as exc_info:
        parse_frequency_lines(lines)
    assert exc_info.value.expected == 10000
    assert exc_info.value.actual == 9999


def test_duplicate_pin_fails_naming_pin():
    counts = build_frequency_map()
    del counts["1234"]
    lines = ["1234,100", "1234,50"] + frequency_lines(counts)

    with pytest.raises(DuplicatePinError, match="1234") as exc_info:
        parse_frequency_lines(lines)
    assert exc_info.value.pin == "1234"


def test_malformed_rows_are_skipped():
    lines = [
        "pin,count",
        "12a4,5",
        "123,5",
        "12345,5",
        "1,2,3",
        "0000,0",
        "0001,-4",
        "0002,many",
        "Ù¡Ù¢Ù£Ù¤,5",
        "",
    ] + frequency_lines(build_frequency_map())

    table = parse_frequency_lines(lines)
    assert len(table) == 10000
    assert table["0000"] == 7000


def test_fields_must_be_bare_ascii_digits():
    counts = build_frequency_map()
    del counts["1234"]
    del counts["5678"]
    lines = [" 1234,5", "1234 ,5", "5678,1_000", "5678,١٢", "5678, 7"] + frequency_lines(counts)

    with pytest.raises(IncompleteTableError) as exc_info:
        parse_frequency_lines(lines)
    assert exc_info.value.actual == 9998


def test_crlf_line_endings_are_accepted():
    lines = [line + "\r\n" for line in frequency_lines(build_frequency_map())]
    assert parse_frequency_lines(lines)["1234"] == 10000


def test_skipped_rows_count_towards_incompleteness():
    counts = build_frequency_map()
    counts["4321"] = 0
    with pytest.raises(IncompleteTableError):
        parse_frequency_lines(frequency_lines(counts))


def test_parse_text_handles_trailing_newline():
    text = "\n".join(frequency_lines(build_frequency_map())) + "\n"
    assert len(parse_frequency_text(text)) == 10000


def test_load_file(tmp_path):
    path = tmp_path / "pin-frequency.csv"
    path.write_text("\n".join(frequency_lines(build_frequency_map())), encoding="utf-8")

    table = load_frequency_file(path)
    assert table["1111"] == 8000


def test_load_missing_file(tmp_path):
    missing = tmp_path / "nope.csv"
    with pytest.raises(FrequencyDataError, match="nope.csv"):
        load_frequency_file(missing)


def test_table_validates_on_construction():
    counts = build_frequency_map()
    counts["0042"] = 0
    with pytest.raises(FrequencyDataError):
        FrequencyTable.from_counts(counts)

    with pytest.raises(IncompleteTableError):
        FrequencyTable.from_counts({"1234": 1})

    counts = build_frequency_map()
    counts["12ab"] = counts.pop("1234")
    with pytest.raises(FrequencyDataError):
        FrequencyTable.from_counts(counts)


def test_table_rejects_pin_with_trailing_newline():
    counts = build_frequency_map()
    counts["1234\n"] = counts.pop("1234")
    with pytest.raises(FrequencyDataError, match="1234"):
        FrequencyTable.from_counts(counts)


def test_table_is_read_only(frequency_table, frequency_map):
    frequency_map["1234"] = 1
    assert frequency_table["1234"] == 10000
    assert frequency_table.get("abcd", 0) == 0
    with pytest.raises(TypeError):
        frequency_table["1234"] = 5


class CountingLoader:
    """Loader stub that records calls and serves a prebuilt table."""

    def __init__(self, table=None, error=None):
        self.table = table
        self.error = error
        self.calls = 0

    def __call__(self, path):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.table


def test_cache_loads_once(frequency_table):
    loader = CountingLoader(frequency_table)
    cache = FrequencyTableCache("unused.csv", loader=loader)

    assert not cache.is_loaded
    assert cache.get() is frequency_table
    assert cache.get() is frequency_table
    assert loader.calls == 1
    assert cache.is_loaded


def test_cache_reset_forces_reload(frequency_table):
    loader = CountingLoader(frequency_table)
    cache = FrequencyTableCache("unused.csv", loader=loader)

    cache.get()
    cache.reset()
    assert not cache.is_loaded
    cache.get()
    assert loader.calls == 2


def test_cache_inject_skips_loading(frequency_table):
    loader = CountingLoader(error=FrequencyDataError("should not load"))
    cache = FrequencyTableCache("unused.csv", loader=loader)

    cache.inject(frequency_table)
    assert cache.get() is frequency_table
    assert loader.calls == 0


def test_cache_does_not_keep_failed_load(frequency_table):
    loader = CountingLoader(error=IncompleteTableError(10000, 9999))
    cache = FrequencyTableCache("unused.csv", loader=loader)

    with pytest.raises(IncompleteTableError):
        cache.get()
    assert not cache.is_loaded

    loader.error = None
    loader.table = frequency_table
    assert cache.get() is frequency_table
    assert loader.calls == 2
