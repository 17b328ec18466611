"""
Frequency Cache Module - Owned, lazily loaded frequency table.
"""

import logging
from pathlib import Path
from typing import Callable, Optional, Union

from .loader import load_frequency_file
from .table import FrequencyTable

logger = logging.getLogger(__name__)


class FrequencyTableCache:
    """
    Holds one validated FrequencyTable for reuse across analyses.

    The table is loaded on first get() and kept until reset(). A failed
    load caches nothing, and is not retried until the next get().
    Tests can inject() a prebuilt table to skip loading entirely.

    Attributes:
        path: File the table is loaded from
    """

    def __init__(
        self,
        path: Union[str, Path],
        loader: Callable[[Path], FrequencyTable] = load_frequency_file
    ):
        """
        Initialize an empty cache.

        Args:
            path: Frequency file location
            loader: Function that loads and validates a table from a path
        """
        self.path = Path(path)
        self._loader = loader
        self._table: Optional[FrequencyTable] = None

    @property
    def is_loaded(self) -> bool:
        """True if a table is cached."""
        return self._table is not None

    def get(self) -> FrequencyTable:
        """
        Get the cached table, loading it on first use.

        Raises:
            FrequencyDataError: If loading fails
        """
        if self._table is None:
            logger.debug(f"Frequency cache miss, loading {self.path}")
            self._table = self._loader(self.path)
        return self._table

    def inject(self, table: FrequencyTable) -> None:
        """Replace the cached table without loading."""
        self._table = table

    def reset(self) -> None:
        """Drop the cached table so the next get() reloads it."""
        self._table = None
