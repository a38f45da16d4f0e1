"""
Shared fixtures for performance benchmarks.

Key design principle: Build expensive resources (the graph) once at
module scope, then benchmark only the hot paths.
"""

import pytest

from src.flight_paths.adapters.algorithms.min_cost import MinCostPathFinder
from src.flight_paths.adapters.algorithms.min_hops import MinHopsPathFinder
from src.flight_paths.adapters.repositories.route_graph_repo import RouteGraph

from tests.route_helpers import build_grid_graph, grid_city

GRID_SIZE = 20


@pytest.fixture(scope="module")
def grid_size() -> int:
    return GRID_SIZE


@pytest.fixture(scope="module")
def grid_graph() -> RouteGraph:
    return build_grid_graph(GRID_SIZE)


@pytest.fixture(scope="module")
def grid_corners():
    return grid_city(0, 0), grid_city(GRID_SIZE - 1, GRID_SIZE - 1)


@pytest.fixture(scope="module")
def min_hops_finder() -> MinHopsPathFinder:
    return MinHopsPathFinder(max_frontier=1_000_000)


@pytest.fixture(scope="module")
def min_cost_finder() -> MinCostPathFinder:
    return MinCostPathFinder()
