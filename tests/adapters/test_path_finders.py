"""
Tests for the minimum-hop and minimum-cost search adapters.

Tests cover:
- The worked example network, with and without a property filter
- Hop-count vs cost priorities and their tie-breaks
- Termination on cyclic graphs
- Agreement with a brute-force search on seeded random graphs
- Frontier cap on the minimum-hop search
"""

import random

import pytest

from src.flight_paths.adapters.algorithms.min_cost import MinCostPathFinder
from src.flight_paths.adapters.algorithms.min_hops import MinHopsPathFinder
from src.flight_paths.config import Settings
from src.flight_paths.exceptions import SearchLimitExceededError
from src.flight_paths.schemas.filters import ALLOW_ALL, EdgeFilter

from tests.route_helpers import assert_well_formed, brute_force_paths, build_graph


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def min_hops() -> MinHopsPathFinder:
    return MinHopsPathFinder(max_frontier=10_000)


@pytest.fixture
def min_cost() -> MinCostPathFinder:
    return MinCostPathFinder()


def random_rows(seed: int, cities: int = 6, routes: int = 20):
    """Seeded random multigraph with small prices and an occasional 'meals' tag."""
    rng = random.Random(seed)
    names = [f"C{i}" for i in range(cities)]
    rows = []
    for _ in range(routes):
        origin, destination = rng.sample(names, 2)
        properties = ("meals",) if rng.random() < 0.5 else ()
        rows.append(
            (rng.choice(["A1", "B2"]), origin, destination, rng.randint(0, 10), properties)
        )
    return rows, names


# =============================================================================
# WORKED EXAMPLE
# =============================================================================


class TestWorkedExample:
    """DEL -> NYC on the worked example network."""

    def test_min_hops_unfiltered(self, example_graph, min_hops):
        path = min_hops.find_path(example_graph, "DEL", "NYC", ALLOW_ALL)

        assert path.route_cities == ["DEL", "LON", "NYC"]
        assert path.hop_count == 2
        assert path.total_cost == 4000
        assert [leg.airline for leg in path.legs] == ["Delta", "Delta"]

    def test_min_cost_unfiltered(self, example_graph, min_cost):
        path = min_cost.find_path(example_graph, "DEL", "NYC", ALLOW_ALL)

        assert path.route_cities == ["DEL", "BLR", "LON", "NYC"]
        assert path.hop_count == 3
        assert path.total_cost == 3500

    def test_meals_filter_has_no_route(self, example_graph, min_hops, min_cost, meals_filter):
        """BLR -> PAR carries no meals, so the meals network is disconnected."""
        assert min_hops.find_path(example_graph, "DEL", "NYC", meals_filter) is None
        assert min_cost.find_path(example_graph, "DEL", "NYC", meals_filter) is None

    def test_results_are_well_formed(self, example_graph, min_hops, min_cost):
        for finder in (min_hops, min_cost):
            path = finder.find_path(example_graph, "DEL", "NYC", ALLOW_ALL)
            assert_well_formed(path, "DEL", "NYC")


# =============================================================================
# PRIORITY AND TIE-BREAK TESTS
# =============================================================================


class TestPriorities:
    """Hop count first for one search, price only for the other."""

    def test_min_hops_prefers_fewer_legs_over_price(self, min_hops, min_cost):
        graph = build_graph(
            [
                ("Delta", "DEL", "NYC", 5000, ()),
                ("Delta", "DEL", "LON", 100, ()),
                ("Delta", "LON", "NYC", 100, ()),
            ]
        )

        hops_path = min_hops.find_path(graph, "DEL", "NYC", ALLOW_ALL)
        cost_path = min_cost.find_path(graph, "DEL", "NYC", ALLOW_ALL)

        assert hops_path.hop_count == 1
        assert hops_path.total_cost == 5000
        assert cost_path.hop_count == 2
        assert cost_path.total_cost == 200

    def test_min_hops_breaks_ties_on_cost(self, min_hops):
        """Among equal leg counts the cheaper path wins, even if found later."""
        graph = build_graph(
            [
                ("Pricey", "DEL", "LON", 2000, ()),
                ("Cheap", "DEL", "LON", 1500, ()),
                ("Delta", "LON", "NYC", 100, ()),
            ]
        )
        path = min_hops.find_path(graph, "DEL", "NYC", ALLOW_ALL)

        assert path.total_cost == 1600
        assert path.legs[0].airline == "Cheap"

    def test_min_hops_full_tie_keeps_first_discovered(self, min_hops):
        graph = build_graph(
            [
                ("Delta", "DEL", "A", 100, ()),
                ("Delta", "DEL", "B", 50, ()),
                ("Delta", "A", "NYC", 100, ()),
                ("Delta", "B", "NYC", 150, ()),
            ]
        )
        path = min_hops.find_path(graph, "DEL", "NYC", ALLOW_ALL)

        assert path.route_cities == ["DEL", "A", "NYC"]
        assert path.total_cost == 200

    def test_min_cost_tie_keeps_first_extracted(self, min_cost):
        """Equal totals: the path whose prefix is cheaper is settled first."""
        graph = build_graph(
            [
                ("Delta", "DEL", "A", 100, ()),
                ("Delta", "DEL", "B", 50, ()),
                ("Delta", "A", "NYC", 100, ()),
                ("Delta", "B", "NYC", 150, ()),
            ]
        )
        path = min_cost.find_path(graph, "DEL", "NYC", ALLOW_ALL)

        assert path.route_cities == ["DEL", "B", "NYC"]
        assert path.total_cost == 200

    @pytest.mark.parametrize("finder_cls", [MinHopsPathFinder, MinCostPathFinder])
    def test_equal_parallel_legs_first_registered_wins(self, finder_cls):
        graph = build_graph(
            [
                ("First", "DEL", "LON", 100, ()),
                ("Second", "DEL", "LON", 100, ()),
                ("Delta", "LON", "NYC", 100, ()),
            ]
        )
        path = finder_cls().find_path(graph, "DEL", "NYC", ALLOW_ALL)

        assert path.legs[0].airline == "First"

    def test_direct_leg(self, min_hops, min_cost):
        graph = build_graph([("Delta", "DEL", "LON", 2000, ())])
        for finder in (min_hops, min_cost):
            path = finder.find_path(graph, "DEL", "LON", ALLOW_ALL)
            assert path.hop_count == 1
            assert path.total_cost == 2000

    def test_zero_price_legs(self, min_cost):
        graph = build_graph(
            [
                ("Free", "DEL", "A", 0, ()),
                ("Free", "A", "NYC", 0, ()),
                ("Delta", "DEL", "NYC", 1, ()),
            ]
        )
        path = min_cost.find_path(graph, "DEL", "NYC", ALLOW_ALL)
        assert path.total_cost == 0
        assert path.hop_count == 2


# =============================================================================
# NO-ROUTE AND TERMINATION TESTS
# =============================================================================


class TestNoRoute:
    """Searches that must come back empty, and must come back at all."""

    @pytest.mark.parametrize("finder_cls", [MinHopsPathFinder, MinCostPathFinder])
    def test_unknown_source(self, finder_cls, example_graph):
        assert finder_cls().find_path(example_graph, "XXX", "NYC", ALLOW_ALL) is None

    @pytest.mark.parametrize("finder_cls", [MinHopsPathFinder, MinCostPathFinder])
    def test_unknown_destination(self, finder_cls, example_graph):
        assert finder_cls().find_path(example_graph, "DEL", "XXX", ALLOW_ALL) is None

    @pytest.mark.parametrize("finder_cls", [MinHopsPathFinder, MinCostPathFinder])
    def test_wrong_direction(self, finder_cls, example_graph):
        """Legs are directed: NYC has no departures."""
        assert finder_cls().find_path(example_graph, "NYC", "DEL", ALLOW_ALL) is None

    @pytest.mark.parametrize("finder_cls", [MinHopsPathFinder, MinCostPathFinder])
    def test_cycles_terminate(self, finder_cls):
        graph = build_graph(
            [
                ("Loop", "A", "B", 0, ()),
                ("Loop", "B", "A", 0, ()),
                ("Loop", "B", "C", 5, ()),
                ("Loop", "C", "A", 0, ()),
                ("Loop", "Z", "TARGET", 1, ()),
            ]
        )
        assert finder_cls().find_path(graph, "A", "TARGET", ALLOW_ALL) is None

    @pytest.mark.parametrize("finder_cls", [MinHopsPathFinder, MinCostPathFinder])
    def test_empty_graph(self, finder_cls):
        assert finder_cls().find_path(build_graph([]), "DEL", "NYC", ALLOW_ALL) is None


# =============================================================================
# BRUTE-FORCE AGREEMENT
# =============================================================================


class TestAgainstBruteForce:
    """Both searches agree with exhaustive enumeration of simple paths."""

    @pytest.mark.parametrize("seed", range(25))
    @pytest.mark.parametrize("required_property", [None, "meals"])
    def test_random_graphs(self, seed, required_property, min_hops, min_cost):
        rows, names = random_rows(seed)
        graph = build_graph(rows)
        edge_filter = EdgeFilter.create(required_property)
        rng = random.Random(seed + 1000)
        source, destination = rng.sample(names, 2)

        candidates = brute_force_paths(graph, source, destination, edge_filter)
        hops_path = min_hops.find_path(graph, source, destination, edge_filter)
        cost_path = min_cost.find_path(graph, source, destination, edge_filter)

        if not candidates:
            assert hops_path is None
            assert cost_path is None
            return

        fewest = min(p.hop_count for p in candidates)
        cheapest_of_fewest = min(p.total_cost for p in candidates if p.hop_count == fewest)
        cheapest = min(p.total_cost for p in candidates)

        assert_well_formed(hops_path, source, destination, edge_filter)
        assert hops_path.hop_count == fewest
        assert hops_path.total_cost == cheapest_of_fewest

        assert_well_formed(cost_path, source, destination, edge_filter)
        assert cost_path.total_cost == cheapest

    @pytest.mark.parametrize("seed", range(10))
    def test_filter_never_improves_result(self, seed, min_hops, min_cost):
        """Restricting legs can only make answers longer, pricier or absent."""
        rows, names = random_rows(seed, cities=5, routes=15)
        graph = build_graph(rows)
        source, destination = random.Random(seed).sample(names, 2)
        meals = EdgeFilter(required_property="meals")

        open_hops = min_hops.find_path(graph, source, destination, ALLOW_ALL)
        meal_hops = min_hops.find_path(graph, source, destination, meals)
        open_cost = min_cost.find_path(graph, source, destination, ALLOW_ALL)
        meal_cost = min_cost.find_path(graph, source, destination, meals)

        if meal_hops is not None:
            assert open_hops is not None
            assert meal_hops.hop_count >= open_hops.hop_count
        if meal_cost is not None:
            assert open_cost is not None
            assert meal_cost.total_cost >= open_cost.total_cost


# =============================================================================
# FRONTIER LIMIT TESTS
# =============================================================================


class TestFrontierLimit:
    """The minimum-hop search gives up rather than exhausting memory."""

    @staticmethod
    def star_graph(spokes: int):
        return build_graph([("Hub", "HUB", f"S{i}", i, ()) for i in range(spokes)])

    def test_limit_raises(self):
        finder = MinHopsPathFinder(max_frontier=5)

        with pytest.raises(SearchLimitExceededError) as exc_info:
            finder.find_path(self.star_graph(10), "HUB", "NOWHERE", ALLOW_ALL)

        assert exc_info.value.limit == 5
        assert exc_info.value.source == "HUB"
        assert exc_info.value.destination == "NOWHERE"

    def test_under_limit_completes(self):
        finder = MinHopsPathFinder(max_frontier=10)
        assert finder.find_path(self.star_graph(10), "HUB", "NOWHERE", ALLOW_ALL) is None

    def test_default_limit_comes_from_settings(self, monkeypatch):
        monkeypatch.setattr(
            "src.flight_paths.adapters.algorithms.min_hops.get_settings",
            lambda: Settings(max_frontier=3),
        )
        finder = MinHopsPathFinder()

        with pytest.raises(SearchLimitExceededError):
            finder.find_path(self.star_graph(5), "HUB", "NOWHERE", ALLOW_ALL)


class TestNames:
    def test_names(self, min_hops, min_cost):
        assert min_hops.name == "Minimum Hops BFS"
        assert min_cost.name == "Minimum Cost Dijkstra"
