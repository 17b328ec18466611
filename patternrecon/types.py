"""
Types Module - Immutable data structures shared by the analysis pipeline.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

PIN_LENGTH = 4


@dataclass(frozen=True)
class TapPoint:
    """
    One recorded tap in raw screen coordinates (pixels).

    Attributes:
        x: Horizontal position, unbounded
        y: Vertical position, unbounded
    """
    x: float
    y: float

    @classmethod
    def from_tuple(cls, point: Tuple[float, float]) -> 'TapPoint':
        """Create TapPoint from an (x, y) pair."""
        return cls(x=float(point[0]), y=float(point[1]))


@dataclass(frozen=True)
class GridBounds:
    """
    Extent of the capture surface when the first tap was recorded.

    Attributes:
        width: Surface width in pixels
        height: Surface height in pixels
    """
    width: float
    height: float

    @property
    def is_usable(self) -> bool:
        """True if both dimensions are positive."""
        return self.width > 0 and self.height > 0


@dataclass(frozen=True)
class NormalizedTap:
    """Tap position in keypad space. Not clamped to [0, 1]."""
    x: float
    y: float


@dataclass(frozen=True)
class DigitProbability:
    """Probability that a tap was meant for one digit."""
    digit: int
    p: float


@dataclass(frozen=True)
class TapAnalysis:
    """
    Digit distribution for one tap position.

    Attributes:
        position: Tap ordinal (0-3)
        probabilities: All 10 digits, sorted by probability descending
    """
    position: int
    probabilities: Tuple[DigitProbability, ...]

    @property
    def top_digit(self) -> int:
        """Most likely digit for this tap."""
        return self.probabilities[0].digit

    def probability_of(self, digit: int) -> float:
        """
        Look up the probability assigned to a digit.

        Args:
            digit: Digit 0-9

        Returns:
            Probability, or 0.0 if the digit is not in the distribution
        """
        for prob in self.probabilities:
            if prob.digit == digit:
                return prob.p
        return 0.0


@dataclass(frozen=True)
class PinCandidate:
    """
    One hypothesized PIN and its score under some ranking.

    The score unit depends on the ranking that produced it: joint
    probability (spatial), raw occurrence count (frequency-filtered)
    or normalized blend in [0, 1] (composite).
    """
    pin: str
    score: float


@dataclass
class AnalysisResult:
    """
    The three ranked lists produced by one analysis call.

    Attributes:
        heatmap_ranking: Spatial ranking (joint probability scores)
        frequency_ranking: Frequency-filtered ranking (raw count scores)
        composite_ranking: Weighted composite ranking (blend scores)
        spatial_weight: Blend weight used for the composite list
    """
    heatmap_ranking: List[PinCandidate] = field(default_factory=list)
    frequency_ranking: List[PinCandidate] = field(default_factory=list)
    composite_ranking: List[PinCandidate] = field(default_factory=list)
    spatial_weight: float = 0.5

    @property
    def is_empty(self) -> bool:
        """True if no ranking produced any candidate."""
        return not (self.heatmap_ranking or self.frequency_ranking
                    or self.composite_ranking)

    @property
    def top_candidate(self) -> Optional[PinCandidate]:
        """Best composite candidate, or None if empty."""
        if self.composite_ranking:
            return self.composite_ranking[0]
        return None
