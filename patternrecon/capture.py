"""
Capture Module - Tap collection contract and in-memory session history.

The interactive surface feeds taps into TapCapture; once four are
recorded the session is complete and further taps are ignored.
SessionHistory keeps only each finished session's top candidate, never
the raw taps.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from .types import PIN_LENGTH, AnalysisResult, GridBounds, PinCandidate, TapPoint

logger = logging.getLogger(__name__)


class TapCapture:
    """
    Collects exactly max_taps taps in chronological order.

    The capture surface size is recorded with the first tap, so later
    resizes do not change how the session is normalized.
    """

    def __init__(self, max_taps: int = PIN_LENGTH):
        """
        Initialize an empty capture.

        Args:
            max_taps: Taps required for a complete session (default 4)
        """
        self.max_taps = max_taps
        self._taps: List[TapPoint] = []
        self._bounds: Optional[GridBounds] = None

    @property
    def taps(self) -> List[TapPoint]:
        """Copy of the recorded taps."""
        return list(self._taps)

    @property
    def bounds(self) -> Optional[GridBounds]:
        """Capture surface size at the first tap, if it was known."""
        return self._bounds

    @property
    def tap_count(self) -> int:
        """Number of taps recorded so far."""
        return len(self._taps)

    @property
    def is_complete(self) -> bool:
        """True once max_taps taps have been recorded."""
        return len(self._taps) == self.max_taps

    def add_tap(self, point: TapPoint, bounds: Optional[GridBounds] = None) -> bool:
        """
        Record a tap.

        Args:
            point: Raw tap coordinates
            bounds: Current capture surface size (only the first tap's is kept)

        Returns:
            True if recorded, False if the capture was already complete
        """
        if self.is_complete:
            logger.debug("Capture complete, ignoring extra tap")
            return False

        if not self._taps:
            self._bounds = bounds
        self._taps.append(point)
        return True

    def reset(self) -> None:
        """Discard all taps and the recorded bounds."""
        self._taps = []
        self._bounds = None


@dataclass(frozen=True)
class SessionEntry:
    """One finished session: when it ended and its best composite guess."""
    id: int
    timestamp: datetime
    top_candidate: PinCandidate


@dataclass
class SessionHistory:
    """Newest-first list of finished sessions."""
    entries: List[SessionEntry] = field(default_factory=list)
    _next_id: int = 1

    def record(self, result: Optional[AnalysisResult]) -> Optional[SessionEntry]:
        """
        Add a session's top composite candidate.

        Args:
            result: Final analysis of the session

        Returns:
            The new entry, or None if the result had no candidates
        """
        if result is None or result.top_candidate is None:
            return None

        entry = SessionEntry(id=self._next_id, timestamp=datetime.now(),
                             top_candidate=result.top_candidate)
        self._next_id += 1
        self.entries.insert(0, entry)
        return entry

    def clear(self) -> None:
        """Remove all entries."""
        self.entries.clear()

    def __len__(self) -> int:
        return len(self.entries)
