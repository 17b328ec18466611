"""
Frequency-Filtered Strategy - Most popular PINs among plausible candidates.
"""

from typing import List, Sequence

from ...types import PinCandidate
from ..base import RankingStrategy
from ..context import RankingContext
from ..factory import register_strategy
from ..scoring import rank_by_filtered_frequency


@register_strategy
class FrequencyFilteredStrategy(RankingStrategy):
    """
    Keeps the spatial top filter_pct of candidates and sorts them by how
    often each PIN occurs in the frequency table.

    Candidates outside the spatial cut never appear, however common.
    Scores are raw occurrence counts.
    """
    name = "frequency"
    description = "Frequency - Popular PINs among the top spatial matches"
    score_unit = "count"
    requires_frequency = True

    def rank(self, candidates: Sequence[PinCandidate], context: RankingContext) -> List[PinCandidate]:
        return rank_by_filtered_frequency(
            candidates,
            context.require_frequency_table(),
            filter_pct=context.filter_pct,
            limit=context.limit
        )
