"""
Route Graph Repository - concurrent adjacency store for flight legs.

Implements the multigraph of flight legs keyed by origin city with:
- Immutable per-city tuples (readers never see a torn sequence)
- Writer lock + per-city tuple swap (readers never block)
- Insertion-ordered neighbours (deterministic search tie-breaks)
"""

from __future__ import annotations

import logging
import threading
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Set, Tuple

from src.flight_paths.schemas.route import RouteRecord

logger = logging.getLogger(__name__)

_NO_ROUTES: Tuple[RouteRecord, ...] = ()


class RouteGraph:
    """
    Append-only directed multigraph of flight legs.

    Architecture:
    - _adjacency: origin city -> immutable tuple of legs
    - Writers serialize on _write_lock and replace only the tuples of the
      origins they touch, one dict item assignment per origin
    - Readers fetch one city's tuple without locking

    A read that starts after a write returns sees that write. A read that
    races a write sees either the old or the new tuple for its city, never
    a mix.

    Usage:
        >>> graph = RouteGraph()
        >>> graph.add_route(RouteRecord.create("Delta", "DEL", "LON", 2000))
        >>> [r.destination for r in graph.neighbors("DEL")]
        ['LON']
    """

    def __init__(self) -> None:
        self._adjacency: Dict[str, Tuple[RouteRecord, ...]] = {}
        self._cities: Set[str] = set()
        self._route_count = 0
        self._version = 0
        self._write_lock = threading.Lock()

    def add_route(self, record: RouteRecord) -> None:
        """
        Append one leg under its origin city.

        No validation and no duplicate detection: parallel offers between
        the same cities are legitimate.
        """
        self.add_routes((record,))

    def add_routes(self, records: Iterable[RouteRecord]) -> int:
        """
        Append several legs, in order, under a single writer acquisition.

        Cost is proportional to the legs written and the existing legs of
        the origins they touch, not to the size of the graph.

        Args:
            records: Legs to append.

        Returns:
            Number of legs appended.
        """
        batch = list(records)
        if not batch:
            return 0

        by_origin: Dict[str, List[RouteRecord]] = {}
        for record in batch:
            by_origin.setdefault(record.origin, []).append(record)

        with self._write_lock:
            for origin, added in by_origin.items():
                # Swap in a new tuple; a published tuple is never modified
                self._adjacency[origin] = self._adjacency.get(origin, _NO_ROUTES) + tuple(added)

            for record in batch:
                self._cities.add(record.origin)
                self._cities.add(record.destination)

            self._route_count += len(batch)
            self._version += 1
            version, total = self._version, self._route_count

        logger.debug(
            "Graph updated to version %d: +%d routes (%d total)",
            version,
            len(batch),
            total,
        )
        return len(batch)

    def neighbors(self, city: str) -> Tuple[RouteRecord, ...]:
        """
        Legs departing from city, in insertion order.

        Returns an empty tuple for unknown cities and for cities that only
        appear as destinations. The returned tuple is immutable, so the
        caller may iterate it while writers keep appending.
        """
        return self._adjacency.get(city, _NO_ROUTES)

    def snapshot(self) -> Mapping[str, Tuple[RouteRecord, ...]]:
        """Read-only copy of the adjacency mapping at this moment."""
        with self._write_lock:
            return MappingProxyType(dict(self._adjacency))

    def has_city(self, city: str) -> bool:
        """Check if city appears as an origin or destination."""
        return city in self._cities

    def has_route(self, origin: str, destination: str) -> bool:
        """Check if a direct leg exists."""
        return any(r.destination == destination for r in self.neighbors(origin))

    @property
    def cities(self) -> frozenset[str]:
        """All cities seen as an origin or destination."""
        with self._write_lock:
            return frozenset(self._cities)

    @property
    def route_count(self) -> int:
        return self._route_count

    @property
    def version(self) -> int:
        """Incremented once per completed write."""
        return self._version

    def __len__(self) -> int:
        return self._route_count
