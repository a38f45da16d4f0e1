"""
Path Finder port interface.

Defines the abstract contract for single-answer route search algorithms.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from src.flight_paths.adapters.repositories.route_graph_repo import RouteGraph
    from src.flight_paths.schemas.filters import EdgeFilter
    from src.flight_paths.schemas.route import FlightPath


class PathFinder(ABC):
    """
    Abstract interface for route search algorithms.

    Implementations read the graph through RouteGraph.neighbors() one city
    at a time and never mutate it.

    Implementations:
    - MinHopsPathFinder: fewest legs, cheapest among ties
    - MinCostPathFinder: lowest total price
    """

    @abstractmethod
    def find_path(
        self,
        graph: RouteGraph,
        source: str,
        destination: str,
        edge_filter: EdgeFilter,
    ) -> Optional[FlightPath]:
        """
        Find the best path between two distinct cities.

        Args:
            graph: Route graph to search.
            source: Origin city.
            destination: Destination city (must differ from source).
            edge_filter: Predicate restricting usable legs.

        Returns:
            Best FlightPath, or None if no route exists.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Algorithm identifier.

        Returns:
            Human-readable algorithm name.
        """
        ...
