"""
Domain services for Flight Paths.

Services orchestrate the interaction between the route graph, the search
algorithms and input validation.
"""

from src.flight_paths.services.route_query_service import RouteQueryService

__all__ = ["RouteQueryService"]
