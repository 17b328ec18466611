"""
Composite Strategy - Weighted blend of spatial and frequency scores.
"""

from typing import List, Sequence

from ...types import PinCandidate
from ..base import RankingStrategy
from ..context import RankingContext
from ..factory import register_strategy
from ..scoring import rank_by_composite


@register_strategy
class CompositeStrategy(RankingStrategy):
    """
    Blends normalized spatial likelihood and normalized popularity.

    The blend weight comes from context.spatial_weight: 1.0 gives the
    spatial order, 0.0 gives pure popularity over the candidate set.
    Scores are in [0, 1].
    """
    name = "composite"
    description = "Composite - Weighted blend of spatial and frequency"
    score_unit = "blend"
    requires_frequency = True

    def rank(self, candidates: Sequence[PinCandidate], context: RankingContext) -> List[PinCandidate]:
        return rank_by_composite(
            candidates,
            context.require_frequency_table(),
            spatial_weight=context.spatial_weight,
            limit=context.limit
        )
