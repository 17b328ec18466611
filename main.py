"""
PatternRecon - Entry Point

Analyzes four recorded taps and prints the spatial, frequency-filtered
and composite PIN rankings.

Example:
    python main.py --tap 10,10 --tap 290,10 --tap 10,390 --tap 290,390 --bounds 300x400
    python main.py --tap 50,50 --tap 150,50 --tap 50,200 --tap 150,200 --weight 0.2
    python main.py ... --strategy composite --debug  # one list + heatmap image
"""

import sys
import logging
import argparse
from typing import List, Optional

from patternrecon import (
    AnalysisResult,
    GridBounds,
    PinAnalyzer,
    PinCandidate,
    TapPoint,
    get_strategy_info,
    get_strategy_names,
)
from patternrecon.settings import load_settings, save_settings

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging to both console and file."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=[
            logging.StreamHandler(),  # Console output
            logging.FileHandler("patternrecon.log", mode='w', encoding='utf-8')  # File output
        ]
    )


def parse_tap(value: str) -> TapPoint:
    """Parse an "X,Y" tap argument."""
    try:
        x_str, y_str = value.split(",")
        return TapPoint.from_tuple((float(x_str), float(y_str)))
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid tap {value!r}, expected X,Y")


def parse_bounds(value: str) -> GridBounds:
    """Parse a "WIDTHxHEIGHT" bounds argument."""
    try:
        width_str, height_str = value.lower().split("x")
        return GridBounds(width=float(width_str), height=float(height_str))
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid bounds {value!r}, expected WIDTHxHEIGHT")


def parse_args(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="PatternRecon - Infer a 4-digit PIN from tap positions"
    )
    parser.add_argument(
        "--tap", "-t",
        type=parse_tap,
        action="append",
        required=True,
        help="Tap position X,Y in pixels (give exactly 4, in tap order)"
    )
    parser.add_argument(
        "--bounds", "-b",
        type=parse_bounds,
        default=None,
        help="Capture surface size WIDTHxHEIGHT (omit for bounding-box mode)"
    )
    parser.add_argument("--weight", "-w", type=float, default=None,
                        help="Spatial weight for the composite ranking, 0-1")
    parser.add_argument("--sigma", type=float, default=None,
                        help="Gaussian kernel spread in keypad units")
    parser.add_argument("--top-k", type=int, default=None,
                        help="Digits kept per tap position")
    parser.add_argument("--filter-pct", type=float, default=None,
                        help="Share of spatial candidates kept by the frequency filter")
    parser.add_argument("--limit", "-n", type=int, default=None,
                        help="Entries per ranked list")
    parser.add_argument("--frequency-file", "-f", default=None,
                        help="PIN,COUNT frequency table")
    parser.add_argument(
        "--strategy", "-s",
        choices=get_strategy_names(),
        default=None,
        help="Print only this ranking"
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable debug mode (save a heatmap image of the taps)"
    )
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug logging")
    parser.add_argument("--save-settings", action="store_true",
                        help="Persist the effective parameters to config.json")

    args = parser.parse_args(argv)
    if len(args.tap) != 4:
        parser.error(f"exactly 4 taps are required, got {len(args.tap)}")
    if args.weight is not None and not 0.0 <= args.weight <= 1.0:
        parser.error("--weight must be between 0 and 1")
    if args.sigma is not None and args.sigma <= 0:
        parser.error("--sigma must be positive")
    if args.top_k is not None and not 1 <= args.top_k <= 10:
        parser.error("--top-k must be between 1 and 10")
    if args.filter_pct is not None and not 0.0 < args.filter_pct <= 1.0:
        parser.error("--filter-pct must be in (0, 1]")
    if args.limit is not None and args.limit < 1:
        parser.error("--limit must be at least 1")
    return args


def build_settings(args) -> dict:
    """Merge saved settings with command line overrides."""
    settings = load_settings()

    overrides = {
        "spatial_weight": args.weight,
        "sigma": args.sigma,
        "top_k": args.top_k,
        "filter_pct": args.filter_pct,
        "limit": args.limit,
        "frequency_path": args.frequency_file,
    }
    for key, value in overrides.items():
        if value is not None:
            settings[key] = value

    # CLI flag overrides saved setting
    if args.debug:
        settings["debug_enabled"] = True

    return settings


def format_ranking(title: str, candidates: List[PinCandidate], score_unit: str) -> str:
    """Format one ranked list for the console."""
    lines = [title, "-" * len(title)]
    if not candidates:
        lines.append("  No candidates found")
    for i, candidate in enumerate(candidates, 1):
        if score_unit == "count":
            score = f"{candidate.score:.0f}"
        else:
            score = f"{candidate.score * 100:.1f}%"
        lines.append(f"  {i:>2}. {candidate.pin}  {score:>10}")
    return "\n".join(lines)


def print_result(result: AnalysisResult, strategy: Optional[str] = None) -> None:
    """Print the requested rankings."""
    lists = {
        "spatial": result.heatmap_ranking,
        "frequency": result.frequency_ranking,
        "composite": result.composite_ranking,
    }
    for info in get_strategy_info():
        name = info["name"]
        if strategy is not None and name != strategy:
            continue
        print(format_ranking(info["description"], lists[name], info["score_unit"]))
        print()


def main(argv: Optional[List[str]] = None) -> int:
    """Analyze the taps given on the command line."""
    args = parse_args(argv)
    setup_logging(args.verbose)

    settings = build_settings(args)
    if args.save_settings:
        save_settings(settings)

    try:
        analyzer = PinAnalyzer(settings)
    except ValueError as e:
        # Out-of-range values from config.json
        logger.error(f"Invalid settings: {e}")
        print(f"Error: invalid settings: {e}", file=sys.stderr)
        return 1

    result = analyzer.analyze(args.tap, args.bounds)
    if result is None:
        print(f"Error: {analyzer.last_error}", file=sys.stderr)
        return 1

    print(f"Spatial weight: {analyzer.spatial_weight:.2f}  "
          f"Frequency weight: {1.0 - analyzer.spatial_weight:.2f}\n")
    print_result(result, args.strategy)

    if settings.get("debug_enabled"):
        from patternrecon.debug import save_heatmap_image

        candidate_set = analyzer.candidate_set
        path = save_heatmap_image(candidate_set.normalized, candidate_set.analyses,
                                  result.composite_ranking)
        logger.info(f"Heatmap image saved: {path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
