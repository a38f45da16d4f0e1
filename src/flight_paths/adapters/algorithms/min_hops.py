"""
Minimum-hop search - breadth-first exploration over partial paths.

Explores paths rather than cities: the same city may be reached through
parallel legs with different prices, and the tie-break on total cost
needs the accumulated cost that a plain visited-city BFS would discard.
"""

import logging
from collections import deque
from typing import Deque, Dict, Optional, Tuple

from src.flight_paths.adapters.repositories.route_graph_repo import RouteGraph
from src.flight_paths.config import get_settings
from src.flight_paths.exceptions import SearchLimitExceededError
from src.flight_paths.ports.path_finder import PathFinder
from src.flight_paths.schemas.filters import EdgeFilter
from src.flight_paths.schemas.route import FlightPath

logger = logging.getLogger(__name__)


def _is_dominated(
    reached: Dict[str, Tuple[int, int]],
    city: str,
    hops: int,
    cost: int,
) -> bool:
    """
    Check a candidate arrival at city against the best arrival so far.

    Any prefix of a minimum-hop path is itself hop-minimal, and among
    hop-minimal prefixes only the first cheapest can lead to the first
    cheapest completion. Everything else is dominated.
    """
    previous = reached.get(city)
    if previous is None:
        return False
    prev_hops, prev_cost = previous
    if prev_hops != hops:
        return prev_hops < hops
    return prev_cost <= cost


class MinHopsPathFinder(PathFinder):
    """
    Fewest legs first, lowest total cost among equal leg counts.

    When both hop count and cost tie, the first completion discovered in
    FIFO order wins.

    Attributes:
        _max_frontier: Queue size that aborts the search.
    """

    def __init__(self, max_frontier: Optional[int] = None) -> None:
        """
        Initialize the minimum-hop path finder.

        Args:
            max_frontier: Largest allowed queue size. Defaults to
                Settings.max_frontier.
        """
        if max_frontier is None:
            max_frontier = get_settings().max_frontier
        self._max_frontier = max_frontier

    @property
    def name(self) -> str:
        """Algorithm identifier."""
        return "Minimum Hops BFS"

    def find_path(
        self,
        graph: RouteGraph,
        source: str,
        destination: str,
        edge_filter: EdgeFilter,
    ) -> Optional[FlightPath]:
        """
        Find the path with the fewest legs from source to destination.

        Completed paths are never expanded further, and extensions longer
        than the best completion so far are pruned.

        Raises:
            SearchLimitExceededError: If the queue outgrows max_frontier.
        """
        queue: Deque[FlightPath] = deque([FlightPath.start(source)])
        reached: Dict[str, Tuple[int, int]] = {source: (0, 0)}
        best: Optional[FlightPath] = None
        expanded = 0

        while queue:
            current = queue.popleft()

            if current.current_city == destination:
                if (
                    best is None
                    or current.hop_count < best.hop_count
                    or (
                        current.hop_count == best.hop_count
                        and current.total_cost < best.total_cost
                    )
                ):
                    best = current
                continue

            next_hops = current.hop_count + 1
            if best is not None and next_hops > best.hop_count:
                continue

            expanded += 1
            for record in graph.neighbors(current.current_city):
                if not edge_filter.allow(record):
                    continue

                extended = current.extend(record)
                if _is_dominated(reached, record.destination, next_hops, extended.total_cost):
                    continue

                reached[record.destination] = (next_hops, extended.total_cost)
                queue.append(extended)

                if len(queue) > self._max_frontier:
                    logger.warning(
                        "Min-hops frontier limit %d hit for %s -> %s",
                        self._max_frontier,
                        source,
                        destination,
                    )
                    raise SearchLimitExceededError(self._max_frontier, source, destination)

        logger.debug(
            "Min-hops search %s -> %s expanded %d paths, found=%s",
            source,
            destination,
            expanded,
            best is not None,
        )
        return best
