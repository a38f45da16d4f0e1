"""
Minimum-cost search - Dijkstra's algorithm over partial paths.
"""

import heapq
import itertools
import logging
from typing import Dict, List, Optional, Tuple

from src.flight_paths.adapters.repositories.route_graph_repo import RouteGraph
from src.flight_paths.ports.path_finder import PathFinder
from src.flight_paths.schemas.filters import EdgeFilter
from src.flight_paths.schemas.route import FlightPath

logger = logging.getLogger(__name__)


class MinCostPathFinder(PathFinder):
    """
    Lowest total price, regardless of leg count.

    Relies on non-negative leg prices: the first path extracted at the
    destination is optimal, since nothing extracted later can be cheaper.
    """

    @property
    def name(self) -> str:
        """Algorithm identifier."""
        return "Minimum Cost Dijkstra"

    def find_path(
        self,
        graph: RouteGraph,
        source: str,
        destination: str,
        edge_filter: EdgeFilter,
    ) -> Optional[FlightPath]:
        """
        Find the cheapest path from source to destination.

        The heap is ordered by (total_cost, insertion sequence), so paths of
        equal cost come out in the order they were discovered.
        """
        sequence = itertools.count()
        heap: List[Tuple[int, int, FlightPath]] = [
            (0, next(sequence), FlightPath.start(source))
        ]
        best_cost: Dict[str, int] = {source: 0}
        expanded = 0

        while heap:
            cost, _, current = heapq.heappop(heap)
            city = current.current_city

            if city == destination:
                logger.debug(
                    "Min-cost search %s -> %s expanded %d paths, cost=%d",
                    source,
                    destination,
                    expanded,
                    cost,
                )
                return current

            # Stale entry: a cheaper path to this city was pushed later
            if cost > best_cost.get(city, cost):
                continue

            expanded += 1
            for record in graph.neighbors(city):
                if not edge_filter.allow(record):
                    continue

                new_cost = cost + record.price
                previous = best_cost.get(record.destination)
                if previous is None or new_cost < previous:
                    best_cost[record.destination] = new_cost
                    heapq.heappush(heap, (new_cost, next(sequence), current.extend(record)))

        logger.debug(
            "Min-cost search %s -> %s expanded %d paths, no route",
            source,
            destination,
            expanded,
        )
        return None
