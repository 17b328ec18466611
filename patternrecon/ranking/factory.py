"""
Strategy Factory Module - Registry and factory for ranking strategies.
"""

from typing import Any, Dict, List, Type

from .base import RankingStrategy


# Global registry of strategies
_STRATEGIES: Dict[str, Type[RankingStrategy]] = {}


def register_strategy(cls: Type[RankingStrategy]) -> Type[RankingStrategy]:
    """
    Decorator to register a strategy class.

    Usage:
        @register_strategy
        class MyStrategy(RankingStrategy):
            name = "my_strategy"
            ...

    Args:
        cls: Strategy class to register

    Returns:
        The same class (for decorator chaining)
    """
    _STRATEGIES[cls.name] = cls
    return cls


def create_strategy(name: str, **kwargs: Any) -> RankingStrategy:
    """
    Create a strategy instance by name.

    Args:
        name: Strategy name (e.g., "spatial", "composite")
        **kwargs: Additional arguments passed to strategy constructor

    Returns:
        Strategy instance

    Raises:
        ValueError: If strategy name not found
    """
    if name not in _STRATEGIES:
        available = ", ".join(_STRATEGIES.keys())
        raise ValueError(f"Unknown strategy: {name}. Available: {available}")
    return _STRATEGIES[name](**kwargs)


def get_strategy_names() -> List[str]:
    """List registered strategy names in registration order."""
    return list(_STRATEGIES.keys())


def get_strategy_info() -> List[Dict[str, Any]]:
    """
    Get metadata for all registered strategies.

    Returns:
        List of dicts with 'name', 'description', 'score_unit' and
        'requires_frequency' keys
    """
    return [
        {
            "name": cls.name,
            "description": cls.description,
            "score_unit": cls.score_unit,
            "requires_frequency": cls.requires_frequency,
        }
        for cls in _STRATEGIES.values()
    ]
