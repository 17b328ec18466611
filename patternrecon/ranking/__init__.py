"""
Ranking Package - Strategies that turn PIN candidates into ranked lists.

Public API:
    - rank_spatial(), rank_by_filtered_frequency(), rank_by_composite():
      pure ranking functions
    - get_frequency(), normalize_frequency(), rank_by_frequency(): helpers
    - check_limit(), check_spatial_weight(): parameter validation
    - RankingContext: Parameters shared by strategies
    - RankingStrategy: Abstract base for strategies
    - create_strategy(): Factory function
    - get_strategy_names(): List available strategies
    - get_strategy_info(): Get strategy metadata

Usage:
    from patternrecon.ranking import create_strategy, RankingContext

    context = RankingContext(frequency_table=table, spatial_weight=0.7)
    strategy = create_strategy("composite")
    ranked = strategy.rank(candidates, context)
"""

from .scoring import (
    DEFAULT_FILTER_PCT,
    DEFAULT_LIMIT,
    DEFAULT_SPATIAL_WEIGHT,
    check_limit,
    check_spatial_weight,
    get_frequency,
    normalize_frequency,
    rank_by_composite,
    rank_by_filtered_frequency,
    rank_by_frequency,
    rank_spatial,
)
from .context import RankingContext

# Strategy framework
from .base import RankingStrategy
from .factory import (
    create_strategy,
    get_strategy_names,
    get_strategy_info,
    register_strategy,
)

# Import strategies to register them
from . import strategies

__all__ = [
    # Functions
    "get_frequency",
    "normalize_frequency",
    "rank_by_frequency",
    "rank_spatial",
    "rank_by_filtered_frequency",
    "rank_by_composite",
    "check_limit",
    "check_spatial_weight",
    # Defaults
    "DEFAULT_LIMIT",
    "DEFAULT_FILTER_PCT",
    "DEFAULT_SPATIAL_WEIGHT",
    # Strategy framework
    "RankingContext",
    "RankingStrategy",
    "create_strategy",
    "get_strategy_names",
    "get_strategy_info",
    "register_strategy",
]
