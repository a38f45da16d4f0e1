"""
Query result schemas.

RouteQueryResult is what the query service returns for an accepted query.
QueryOutcome is what the public facade reports, including rejections.
"""

from dataclasses import dataclass
from typing import Optional

from src.flight_paths.schemas.filters import EdgeFilter
from src.flight_paths.schemas.route import FlightPath


@dataclass(frozen=True)
class RouteQueryResult:
    """
    Answers of both searches for one accepted query.

    Attributes:
        source: Query origin city.
        destination: Query destination city.
        edge_filter: Filter both searches ran with.
        min_hops: Fewest-legs path (cheapest among ties), or None.
        min_cost: Cheapest path, or None.
    """

    source: str
    destination: str
    edge_filter: EdgeFilter
    min_hops: Optional[FlightPath] = None
    min_cost: Optional[FlightPath] = None

    @property
    def has_route(self) -> bool:
        return self.min_hops is not None or self.min_cost is not None


@dataclass(frozen=True)
class QueryOutcome:
    """
    Reported outcome of a query at the public boundary.

    Either `result` is set (query accepted), or `error` carries the
    user-facing rejection message.
    """

    source: str
    destination: str
    result: Optional[RouteQueryResult] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def min_hops(self) -> Optional[FlightPath]:
        return self.result.min_hops if self.result else None

    @property
    def min_cost(self) -> Optional[FlightPath]:
        return self.result.min_cost if self.result else None
