"""
Shared fixtures.
"""

import sys
from pathlib import Path

import pytest

# Add project root and tests dir to path
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent))

from frequency_data import build_frequency_map
from patternrecon.frequency import FrequencyTable


@pytest.fixture
def frequency_map():
    return build_frequency_map()


@pytest.fixture
def frequency_table(frequency_map):
    return FrequencyTable.from_counts(frequency_map)
