"""
FlightPaths Use Case - Public API for route registration and search.

This module provides the main entry point for the flight paths engine.
It acts as a Facade/Factory, handling dependency initialization and
converting query rejections into reported outcomes.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from src.flight_paths.adapters.algorithms.min_cost import MinCostPathFinder
from src.flight_paths.adapters.algorithms.min_hops import MinHopsPathFinder
from src.flight_paths.adapters.data_providers.tabular_provider import records_from_df
from src.flight_paths.adapters.repositories.route_graph_repo import RouteGraph
from src.flight_paths.config import Settings, get_settings
from src.flight_paths.exceptions import InvalidQueryError, SearchLimitExceededError
from src.flight_paths.ports.path_finder import PathFinder
from src.flight_paths.ports.route_data_provider import RouteDataProvider
from src.flight_paths.schemas.filters import EdgeFilter
from src.flight_paths.schemas.query import QueryOutcome
from src.flight_paths.schemas.route import RouteRecord
from src.flight_paths.services.route_query_service import RouteQueryService

logger = logging.getLogger(__name__)


class FlightPaths:
    """
    Public API for registering flight legs and finding routes.

    Example usage:
        >>> paths = FlightPaths()
        >>> paths.register_route("Delta", "DEL", "LON", 2000)
        >>> outcome = paths.search("DEL", "LON")
        >>> outcome.min_cost.total_cost
        2000

    Attributes:
        _graph: Shared route graph.
        _service: Underlying RouteQueryService.
    """

    def __init__(
        self,
        graph: Optional[RouteGraph] = None,
        min_hops_finder: Optional[PathFinder] = None,
        min_cost_finder: Optional[PathFinder] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        """
        Initialize the engine with optional custom dependencies.

        Args:
            graph: Existing graph to share. If None, starts empty.
            min_hops_finder: Custom minimum-hop algorithm.
            min_cost_finder: Custom minimum-cost algorithm.
            settings: Settings override. Defaults to get_settings().
        """
        self._settings = settings or get_settings()
        self._graph = graph if graph is not None else RouteGraph()

        if min_hops_finder is None:
            min_hops_finder = MinHopsPathFinder(max_frontier=self._settings.max_frontier)
        if min_cost_finder is None:
            min_cost_finder = MinCostPathFinder()

        self._service = RouteQueryService(
            graph=self._graph,
            min_hops_finder=min_hops_finder,
            min_cost_finder=min_cost_finder,
        )

        logger.info(
            "FlightPaths initialized with %s / %s",
            min_hops_finder.name,
            min_cost_finder.name,
        )

    def register_route(
        self,
        airline: str,
        origin: str,
        destination: str,
        price: int,
        properties: Optional[Iterable[str]] = None,
    ) -> RouteRecord:
        """
        Register one flight leg.

        Raises:
            InvalidInputError: If any field is malformed.
        """
        return self._service.register_route(airline, origin, destination, price, properties)

    def load_routes(self, provider: RouteDataProvider) -> int:
        """
        Register every route from a tabular provider, in row order.

        Args:
            provider: CSV / SQLite provider.

        Returns:
            Number of routes registered.
        """
        df = provider.get_routes_df()
        count = self._service.register_records(records_from_df(df))
        logger.info("Loaded %d routes from %s", count, provider.name)
        return count

    def search(
        self,
        source: str,
        destination: str,
        required_property: Optional[str] = None,
    ) -> QueryOutcome:
        """
        Search both routes between two cities.

        Rejections are reported on the outcome rather than raised, so a
        caller can keep going after a bad query.

        Args:
            source: Origin city.
            destination: Destination city.
            required_property: Only use legs with this property.

        Returns:
            QueryOutcome with results, or with an error message.
        """
        edge_filter = EdgeFilter.create(required_property)
        try:
            result = self._service.query(source, destination, edge_filter)
        except (InvalidQueryError, SearchLimitExceededError) as e:
            logger.warning("Query %s -> %s rejected: %s", source, destination, e)
            return QueryOutcome(source=source, destination=destination, error=str(e))

        return QueryOutcome(source=source, destination=destination, result=result)

    def search_many(
        self,
        queries: Sequence[Tuple[str, str, Optional[str]]],
    ) -> List[QueryOutcome]:
        """
        Run a batch of independent (source, destination, property) queries.

        A rejected query yields an error outcome and does not stop the batch.
        """
        return [self.search(src, dst, prop) for src, dst, prop in queries]

    def get_available_cities(self) -> frozenset[str]:
        """All cities seen as an origin or destination."""
        return self._graph.cities

    def has_route(self, origin: str, destination: str) -> bool:
        """Check if a direct leg exists between two cities."""
        return self._graph.has_route(origin, destination)

    @property
    def graph(self) -> RouteGraph:
        return self._graph

    @property
    def service(self) -> RouteQueryService:
        return self._service
