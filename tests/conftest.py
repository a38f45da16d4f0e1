"""
Shared fixtures for flight_paths tests.
"""

import pytest

from src.flight_paths.adapters.repositories.route_graph_repo import RouteGraph
from src.flight_paths.config import Settings
from src.flight_paths.schemas.filters import EdgeFilter

from tests.route_helpers import EXAMPLE_ROUTES, build_graph


@pytest.fixture
def settings() -> Settings:
    """Default settings, independent of the process environment."""
    return Settings()


@pytest.fixture
def example_graph() -> RouteGraph:
    """Worked-example network with raw property sets."""
    return build_graph(EXAMPLE_ROUTES)


@pytest.fixture
def meals_filter() -> EdgeFilter:
    return EdgeFilter(required_property="meals")
