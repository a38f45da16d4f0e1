"""
Port interfaces for Flight Paths.

Ports define the abstract interfaces that the domain layer uses to
communicate with algorithms and data sources. This follows the
Ports and Adapters (Hexagonal) architecture pattern.
"""

from src.flight_paths.ports.path_finder import PathFinder
from src.flight_paths.ports.route_data_provider import RouteDataProvider

__all__ = [
    "PathFinder",
    "RouteDataProvider",
]
