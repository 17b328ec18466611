"""
Base Strategy Module - Abstract base class for ranking strategies.
"""

from abc import ABC, abstractmethod
from typing import List, Sequence

from ..types import PinCandidate
from .context import RankingContext


class RankingStrategy(ABC):
    """
    Abstract base class for all ranking strategies.

    Subclasses must implement rank() and define name, description and
    score_unit class attributes. Strategies are stateless: rank() is a
    pure function of its arguments.

    Attributes:
        name: Short identifier for the strategy
        description: Human-readable description for display
        score_unit: What the returned scores mean ("probability", "count", "blend")
        requires_frequency: True if the strategy reads the frequency table
    """
    name: str = "base"
    description: str = "Base strategy"
    score_unit: str = "probability"
    requires_frequency: bool = False

    @abstractmethod
    def rank(self, candidates: Sequence[PinCandidate], context: RankingContext) -> List[PinCandidate]:
        """
        Rank spatially sorted candidates.

        Args:
            candidates: Output of generate_candidates()
            context: Frequency table, weights and limit

        Returns:
            New list of at most context.limit candidates
        """
        pass
