"""
Schema definitions for Flight Paths.

Frozen dataclasses for legs, paths, filters and query results, plus the
Pandera contract for tabular route data.
"""

from .filters import ALLOW_ALL, EdgeFilter
from .query import QueryOutcome, RouteQueryResult
from .route import (
    FlightPath,
    RouteDataFrame,
    RouteRecord,
    RouteRecordSchema,
    parse_properties,
)

__all__ = [
    # Route schemas
    "RouteRecord",
    "FlightPath",
    "RouteRecordSchema",
    "RouteDataFrame",
    "parse_properties",
    # Filters
    "EdgeFilter",
    "ALLOW_ALL",
    # Query results
    "RouteQueryResult",
    "QueryOutcome",
]
