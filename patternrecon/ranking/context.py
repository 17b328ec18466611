"""
Ranking Context Module - Parameters shared by ranking strategies.
"""

from dataclasses import dataclass
from typing import Mapping, Optional

from .scoring import DEFAULT_FILTER_PCT, DEFAULT_LIMIT, DEFAULT_SPATIAL_WEIGHT


@dataclass(frozen=True)
class RankingContext:
    """
    Inputs a ranking strategy may need besides the candidates.

    Attributes:
        frequency_table: PIN -> count (required by frequency-aware strategies)
        spatial_weight: Composite blend weight w in [0, 1]
        filter_pct: Share of spatial candidates kept by the frequency filter
        limit: Maximum list length
    """
    frequency_table: Optional[Mapping[str, int]] = None
    spatial_weight: float = DEFAULT_SPATIAL_WEIGHT
    filter_pct: float = DEFAULT_FILTER_PCT
    limit: int = DEFAULT_LIMIT

    def require_frequency_table(self) -> Mapping[str, int]:
        """
        Get the frequency table or fail.

        Raises:
            ValueError: If no table was supplied
        """
        if self.frequency_table is None:
            raise ValueError("Ranking requires a frequency table")
        return self.frequency_table
