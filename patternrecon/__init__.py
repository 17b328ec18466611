"""
PatternRecon - Infer a 4-digit PIN from four taps on an unlabeled keypad.

Combines a spatial likelihood model (distance from each tap to each key)
with a real-world PIN frequency prior, producing three ranked lists.

Public API:
    - TapPoint, GridBounds: Raw capture input
    - normalize_taps(): Map taps into keypad space
    - get_digit_probabilities(): Per-tap digit distribution
    - generate_candidates(): Scored whole-PIN hypotheses
    - rank_spatial(), rank_by_filtered_frequency(), rank_by_composite()
    - FrequencyTable, FrequencyTableCache: Frequency reference
    - run_pipeline(), PinAnalyzer: Analysis entry points
    - TapCapture, SessionHistory: Capture contract helpers

Usage:
    from patternrecon import PinAnalyzer, TapPoint, GridBounds

    analyzer = PinAnalyzer({"frequency_path": "data/pin-frequency.csv"})
    taps = [TapPoint(10, 10), TapPoint(290, 10), TapPoint(10, 390), TapPoint(290, 390)]
    result = analyzer.analyze(taps, GridBounds(300, 400), spatial_weight=0.7)

    for candidate in result.composite_ranking:
        print(candidate.pin, candidate.score)

    # Re-rank without regenerating candidates
    result = analyzer.set_weight(0.2)
"""

__version__ = "0.1.0"

# Core data structures
from .types import (
    PIN_LENGTH,
    TapPoint,
    GridBounds,
    NormalizedTap,
    DigitProbability,
    TapAnalysis,
    PinCandidate,
    AnalysisResult,
)

# Analysis stages
from .keypad import KEYPAD_ASPECT_RATIO, KEY_CENTERS, get_key_center, nearest_digit
from .normalize import normalize_taps
from .likelihood import DEFAULT_SIGMA, get_digit_probabilities, analyze_taps
from .candidates import DEFAULT_TOP_K, generate_candidates, rank_by_heatmap

# Frequency reference
from .frequency import (
    FrequencyDataError,
    DuplicatePinError,
    IncompleteTableError,
    FrequencyTable,
    FrequencyTableCache,
    load_frequency_file,
    parse_frequency_text,
)

# Rankings
from .ranking import (
    get_frequency,
    normalize_frequency,
    rank_by_frequency,
    rank_spatial,
    rank_by_filtered_frequency,
    rank_by_composite,
    create_strategy,
    get_strategy_names,
    get_strategy_info,
)

# Entry points
from .pipeline import CandidateSet, build_candidates, rank_candidates, run_pipeline, PinAnalyzer
from .capture import TapCapture, SessionHistory, SessionEntry

__all__ = [
    # Data structures
    "PIN_LENGTH",
    "TapPoint",
    "GridBounds",
    "NormalizedTap",
    "DigitProbability",
    "TapAnalysis",
    "PinCandidate",
    "AnalysisResult",
    # Keypad
    "KEYPAD_ASPECT_RATIO",
    "KEY_CENTERS",
    "get_key_center",
    "nearest_digit",
    # Stages
    "normalize_taps",
    "DEFAULT_SIGMA",
    "get_digit_probabilities",
    "analyze_taps",
    "DEFAULT_TOP_K",
    "generate_candidates",
    "rank_by_heatmap",
    # Frequency
    "FrequencyDataError",
    "DuplicatePinError",
    "IncompleteTableError",
    "FrequencyTable",
    "FrequencyTableCache",
    "load_frequency_file",
    "parse_frequency_text",
    # Rankings
    "get_frequency",
    "normalize_frequency",
    "rank_by_frequency",
    "rank_spatial",
    "rank_by_filtered_frequency",
    "rank_by_composite",
    "create_strategy",
    "get_strategy_names",
    "get_strategy_info",
    # Entry points
    "CandidateSet",
    "build_candidates",
    "rank_candidates",
    "run_pipeline",
    "PinAnalyzer",
    "TapCapture",
    "SessionHistory",
    "SessionEntry",
]
