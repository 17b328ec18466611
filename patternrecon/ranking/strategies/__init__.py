"""
Strategies Package - Built-in ranking strategies.

Import this module to register all built-in strategies.
"""

from .spatial import SpatialStrategy
from .frequency_filtered import FrequencyFilteredStrategy
from .composite import CompositeStrategy

__all__ = [
    "SpatialStrategy",
    "FrequencyFilteredStrategy",
    "CompositeStrategy",
]
