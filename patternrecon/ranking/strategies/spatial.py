"""
Spatial Strategy - Ranks by joint tap likelihood only.
"""

from typing import List, Sequence

from ...types import PinCandidate
from ..base import RankingStrategy
from ..context import RankingContext
from ..factory import register_strategy
from ..scoring import rank_spatial


@register_strategy
class SpatialStrategy(RankingStrategy):
    """
    Identity ranking over the generated candidates.

    Scores are the product of the four per-tap digit probabilities.
    """
    name = "spatial"
    description = "Spatial - Closest keys to the taps"
    score_unit = "probability"

    def rank(self, candidates: Sequence[PinCandidate], context: RankingContext) -> List[PinCandidate]:
        return rank_spatial(candidates, context.limit)
