"""
Algorithm adapters for route search.
"""

from src.flight_paths.adapters.algorithms.min_cost import MinCostPathFinder
from src.flight_paths.adapters.algorithms.min_hops import MinHopsPathFinder

__all__ = [
    "MinCostPathFinder",
    "MinHopsPathFinder",
]
