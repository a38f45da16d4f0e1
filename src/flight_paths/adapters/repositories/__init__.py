"""
Repository adapters for route storage.
"""

from src.flight_paths.adapters.repositories.route_graph_repo import RouteGraph

__all__ = ["RouteGraph"]
