"""
Route Query Service - Domain orchestrator for registration and search.

Coordinates the interaction between:
- RouteGraph (concurrent adjacency store)
- PathFinder adapters (minimum-hop and minimum-cost searches)
- EdgeFilter (per-query leg predicate)
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Iterable, Optional

from src.flight_paths.schemas.filters import ALLOW_ALL, EdgeFilter
from src.flight_paths.schemas.query import RouteQueryResult
from src.flight_paths.schemas.route import RouteRecord
from src.flight_paths.validation import validate_query, validate_route_input

if TYPE_CHECKING:
    from src.flight_paths.adapters.repositories.route_graph_repo import RouteGraph
    from src.flight_paths.ports.path_finder import PathFinder

logger = logging.getLogger(__name__)


class RouteQueryService:
    """
    Domain service for registering legs and answering route queries.

    Registration validates input and appends to the graph. A query
    validates its cities, then runs both searches against the live graph.
    The graph is never locked for the duration of a search.

    This service holds no per-query state and is thread-safe.

    Attributes:
        _graph: Shared route graph.
        _min_hops: Fewest-legs search adapter.
        _min_cost: Cheapest-price search adapter.
    """

    def __init__(
        self,
        graph: RouteGraph,
        min_hops_finder: PathFinder,
        min_cost_finder: PathFinder,
    ) -> None:
        """
        Initialize the route query service.

        Args:
            graph: Route graph shared with other writers and readers.
            min_hops_finder: Algorithm adapter for minimum-hop search.
            min_cost_finder: Algorithm adapter for minimum-cost search.
        """
        self._graph = graph
        self._min_hops = min_hops_finder
        self._min_cost = min_cost_finder

    def register_route(
        self,
        airline: str,
        origin: str,
        destination: str,
        price: int,
        properties: Optional[Iterable[str]] = None,
    ) -> RouteRecord:
        """
        Validate and append one flight leg.

        Args:
            airline: Operating airline.
            origin: Departure city.
            destination: Arrival city.
            price: Non-negative integer price.
            properties: Already-derived property tags.

        Returns:
            The stored RouteRecord.

        Raises:
            InvalidInputError: If any field is malformed.
        """
        validate_route_input(airline, origin, destination, price)
        record = RouteRecord.create(airline, origin, destination, price, properties)
        self._graph.add_route(record)
        logger.info("%s %s -> %s registered", airline, origin, destination)
        return record

    def register_records(self, records: Iterable[RouteRecord]) -> int:
        """
        Validate and append pre-built legs in one batch.

        The whole batch is validated before anything is appended, so a bad
        row leaves the graph untouched.

        Returns:
            Number of legs appended.

        Raises:
            InvalidInputError: If any record is malformed.
        """
        batch = list(records)
        for record in batch:
            validate_route_input(
                record.airline, record.origin, record.destination, record.price
            )
        count = self._graph.add_routes(batch)
        logger.info("Registered %d routes in batch", count)
        return count

    def query(
        self,
        source: str,
        destination: str,
        edge_filter: Optional[EdgeFilter] = None,
    ) -> RouteQueryResult:
        """
        Run both searches between two cities.

        A missing route is a normal answer (None), not an error.

        Args:
            source: Origin city.
            destination: Destination city.
            edge_filter: Leg predicate; None means every leg is allowed.

        Returns:
            RouteQueryResult with both answers.

        Raises:
            InvalidQueryError: If source equals destination or is blank.
            SearchLimitExceededError: If a search frontier outgrows its cap.
        """
        validate_query(source, destination)
        edge_filter = edge_filter or ALLOW_ALL

        start_time = time.perf_counter()
        min_hops = self._min_hops.find_path(self._graph, source, destination, edge_filter)
        hops_time = time.perf_counter() - start_time

        cost_start = time.perf_counter()
        min_cost = self._min_cost.find_path(self._graph, source, destination, edge_filter)
        cost_time = time.perf_counter() - cost_start

        logger.info(
            "Query %s -> %s (filter=%s) completed in %.3fms "
            "(hops: %.3fms, cost: %.3fms), route found: %s",
            source,
            destination,
            edge_filter.required_property,
            (hops_time + cost_time) * 1000,
            hops_time * 1000,
            cost_time * 1000,
            min_hops is not None or min_cost is not None,
        )

        return RouteQueryResult(
            source=source,
            destination=destination,
            edge_filter=edge_filter,
            min_hops=min_hops,
            min_cost=min_cost,
        )

    @property
    def graph(self) -> RouteGraph:
        return self._graph

    @property
    def algorithm_names(self) -> tuple[str, str]:
        """Names of the (min-hops, min-cost) algorithms."""
        return self._min_hops.name, self._min_cost.name
