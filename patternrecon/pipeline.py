"""
Pipeline Module - Analysis entry point for captured tap sessions.

    raw taps + bounds -> normalize -> per-tap digit probabilities
        -> candidates -> spatial / frequency / composite rankings

Candidate generation is the expensive step and depends only on the taps,
the bounds, sigma and top_k. PinAnalyzer caches it per tap set so that
changing the blend weight only re-runs the cheap ranking passes.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

from .candidates import DEFAULT_TOP_K, generate_candidates
from .frequency import FrequencyDataError, FrequencyTableCache
from .likelihood import DEFAULT_SIGMA, analyze_taps
from .normalize import normalize_taps
from .ranking import (
    DEFAULT_FILTER_PCT,
    DEFAULT_LIMIT,
    DEFAULT_SPATIAL_WEIGHT,
    RankingContext,
    check_limit,
    check_spatial_weight,
    create_strategy,
    get_strategy_names,
)
from .settings import DEFAULT_SETTINGS
from .types import AnalysisResult, GridBounds, NormalizedTap, PinCandidate, TapAnalysis, TapPoint

logger = logging.getLogger(__name__)


__all__ = [
    "CandidateSet",
    "build_candidates",
    "rank_candidates",
    "run_pipeline",
    "PinAnalyzer",
]


@dataclass(frozen=True)
class CandidateSet:
    """
    Spatial analysis of one tap set, reusable across blend weights.

    Attributes:
        normalized: Taps in keypad space
        analyses: Per-tap digit distributions
        candidates: All generated candidates, spatially ranked
    """
    normalized: Tuple[NormalizedTap, ...] = field(default_factory=tuple)
    analyses: Tuple[TapAnalysis, ...] = field(default_factory=tuple)
    candidates: Tuple[PinCandidate, ...] = field(default_factory=tuple)


def build_candidates(
    taps: Sequence[TapPoint],
    bounds: Optional[GridBounds] = None,
    sigma: float = DEFAULT_SIGMA,
    top_k: int = DEFAULT_TOP_K
) -> CandidateSet:
    """
    Run the spatial half of the pipeline.

    Args:
        taps: Raw taps in chronological order
        bounds: Capture surface size, or None for bounding-box mode
        sigma: Kernel spread
        top_k: Digits kept per position

    Returns:
        CandidateSet (with no candidates unless there were exactly 4 taps)
    """
    normalized = normalize_taps(taps, bounds)
    analyses = analyze_taps(normalized, sigma)
    candidates = generate_candidates(analyses, top_k)
    return CandidateSet(normalized=tuple(normalized),
                        analyses=tuple(analyses),
                        candidates=tuple(candidates))


def rank_candidates(
    candidates: Sequence[PinCandidate],
    frequency_table: Optional[Mapping[str, int]],
    spatial_weight: float = DEFAULT_SPATIAL_WEIGHT,
    filter_pct: float = DEFAULT_FILTER_PCT,
    limit: int = DEFAULT_LIMIT
) -> AnalysisResult:
    """
    Produce the three ranked lists for already generated candidates.

    Args:
        candidates: Spatially ranked candidates
        frequency_table: PIN -> occurrence count, or None to produce only
            the lists that do not need one
        spatial_weight: Composite blend weight in [0, 1]
        filter_pct: Spatial share kept by the frequency filter
        limit: Length of each list

    Returns:
        AnalysisResult bundle
    """
    check_spatial_weight(spatial_weight)
    check_limit(limit)

    context = RankingContext(frequency_table=frequency_table,
                             spatial_weight=spatial_weight,
                             filter_pct=filter_pct,
                             limit=limit)

    rankings = {}
    for name in get_strategy_names():
        strategy = create_strategy(name)
        if strategy.requires_frequency and frequency_table is None:
            logger.debug(f"No frequency table, skipping {name} ranking")
            rankings[name] = []
            continue
        rankings[name] = strategy.rank(candidates, context)

    return AnalysisResult(
        heatmap_ranking=rankings["spatial"],
        frequency_ranking=rankings["frequency"],
        composite_ranking=rankings["composite"],
        spatial_weight=spatial_weight,
    )


def run_pipeline(
    taps: Sequence[TapPoint],
    frequency_table: Optional[Mapping[str, int]],
    bounds: Optional[GridBounds] = None,
    spatial_weight: float = DEFAULT_SPATIAL_WEIGHT,
    sigma: float = DEFAULT_SIGMA,
    top_k: int = DEFAULT_TOP_K,
    filter_pct: float = DEFAULT_FILTER_PCT,
    limit: int = DEFAULT_LIMIT
) -> AnalysisResult:
    """
    Analyze one tap session end to end.

    Fewer or more than 4 taps is not an error: every list comes back empty.
    Without a frequency table only the spatial list is filled.

    Returns:
        AnalysisResult bundle
    """
    candidate_set = build_candidates(taps, bounds, sigma, top_k)
    return rank_candidates(candidate_set.candidates, frequency_table,
                           spatial_weight, filter_pct, limit)


class PinAnalyzer:
    """
    Re-invocable analysis entry point for a capture layer.

    Owns the frequency table cache and remembers the candidates of the
    last tap set. Calling analyze() again with the same taps and a new
    weight (or set_weight()) skips normalization and candidate generation.

    Frequency load failures are logged, stored in last_error and reported
    as a None result; they are not retried until the next call.
    """

    def __init__(self, settings: Optional[Dict[str, Any]] = None,
                 frequency_cache: Optional[FrequencyTableCache] = None):
        """
        Initialize the analyzer.

        Args:
            settings: Parameter overrides (see settings.DEFAULT_SETTINGS)
            frequency_cache: Table cache; built from settings["frequency_path"]
                if omitted

        Raises:
            ValueError: If the limit or spatial weight setting is out of range
        """
        params = DEFAULT_SETTINGS.copy()
        if settings:
            params.update(settings)

        self.sigma = float(params["sigma"])
        self.top_k = int(params["top_k"])
        self.filter_pct = float(params["filter_pct"])
        self.limit = check_limit(int(params["limit"]))
        self.spatial_weight = check_spatial_weight(float(params["spatial_weight"]))

        if frequency_cache is None:
            frequency_cache = FrequencyTableCache(params["frequency_path"])
        self.frequency_cache = frequency_cache

        self._cache_key: Optional[tuple] = None
        self._candidate_set: Optional[CandidateSet] = None
        self.last_result: Optional[AnalysisResult] = None
        self.last_error: Optional[str] = None

    @property
    def candidate_set(self) -> Optional[CandidateSet]:
        """Candidates of the most recently analyzed tap set."""
        return self._candidate_set

    def _get_candidates(self, taps: Sequence[TapPoint],
                        bounds: Optional[GridBounds]) -> CandidateSet:
        """Return cached candidates for this tap set, generating on a miss."""
        key = (tuple(taps), bounds, self.sigma, self.top_k)
        if self._candidate_set is not None and key == self._cache_key:
            logger.debug("Reusing cached candidates")
            return self._candidate_set

        logger.debug(f"Generating candidates for {len(taps)} taps")
        self._candidate_set = build_candidates(taps, bounds, self.sigma, self.top_k)
        self._cache_key = key
        return self._candidate_set

    def analyze(self, taps: Sequence[TapPoint], bounds: Optional[GridBounds] = None,
                spatial_weight: Optional[float] = None) -> Optional[AnalysisResult]:
        """
        Analyze a tap session.

        Args:
            taps: Raw taps in chronological order
            bounds: Capture surface size at the first tap
            spatial_weight: Blend weight; keeps the current one if None

        Returns:
            AnalysisResult, or None if the frequency table failed to load

        Raises:
            ValueError: If spatial_weight is outside [0, 1]; the current
                weight is kept
        """
        if spatial_weight is not None:
            self.spatial_weight = check_spatial_weight(spatial_weight)

        self.last_error = None
        try:
            table = self.frequency_cache.get()
        except FrequencyDataError as e:
            logger.error(f"Analysis failed: {e}")
            self.last_error = str(e)
            self.last_result = None
            return None

        candidate_set = self._get_candidates(taps, bounds)
        self.last_result = rank_candidates(candidate_set.candidates, table,
                                           self.spatial_weight, self.filter_pct,
                                           self.limit)
        return self.last_result

    def set_weight(self, spatial_weight: float) -> Optional[AnalysisResult]:
        """
        Change the blend weight and re-rank the last tap set.

        Returns:
            New AnalysisResult, or None if nothing was analyzed yet or the
            frequency table failed to load

        Raises:
            ValueError: If spatial_weight is outside [0, 1]; the current
                weight is kept
        """
        self.spatial_weight = check_spatial_weight(spatial_weight)
        if self._candidate_set is None:
            return None

        self.last_error = None
        try:
            table = self.frequency_cache.get()
        except FrequencyDataError as e:
            logger.error(f"Re-ranking failed: {e}")
            self.last_error = str(e)
            self.last_result = None
            return None

        self.last_result = rank_candidates(self._candidate_set.candidates, table,
                                           self.spatial_weight, self.filter_pct,
                                           self.limit)
        return self.last_result

    def reset(self) -> None:
        """Forget cached candidates and the last result (table stays cached)."""
        self._cache_key = None
        self._candidate_set = None
        self.last_result = None
        self.last_error = None
