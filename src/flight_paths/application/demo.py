"""
Flight Paths Demo - Main Entry Point.

Registers a small fixed network, then prints the minimum-hop and
cheapest routes from DEL to NYC with and without the meals filter.

Usage:
    python -m src.flight_paths.application.demo
    python -m src.flight_paths.application.demo --routes data/routes.csv --source DEL --destination NYC --meals
"""

import argparse
import logging
import sys
from typing import List, Optional, Sequence, Set, Tuple

from src.flight_paths.adapters.data_providers.tabular_provider import provider_for_path
from src.flight_paths.application.flight_paths import FlightPaths
from src.flight_paths.application.logging_setup import setup_logging
from src.flight_paths.application.rendering import render_result
from src.flight_paths.config import get_settings
from src.flight_paths.schemas.route import RouteRecord

logger = logging.getLogger(__name__)

MEALS = "meals"

# Airlines that serve meals on every flight, whatever the booking says
MEAL_SERVING_AIRLINES = frozenset({"indigo"})

# (airline, origin, destination, price, meals)
DEMO_FLIGHTS: List[Tuple[str, str, str, int, bool]] = [
    ("JetAir", "DEL", "BLR", 500, False),
    ("JetAir", "BLR", "LON", 1000, False),
    ("Delta", "DEL", "LON", 2000, False),
    ("Delta", "LON", "NYC", 2000, False),
    ("IndiGo", "LON", "NYC", 2500, True),
    ("IndiGo", "DEL", "BLR", 600, True),
    ("IndiGo", "BLR", "PAR", 800, False),
    ("IndiGo", "PAR", "LON", 300, True),
]


def derive_properties(airline: str, meals: bool) -> Set[str]:
    """Property set for a flight under the demo's meal policy."""
    properties: Set[str] = set()
    if meals or airline.lower() in MEAL_SERVING_AIRLINES:
        properties.add(MEALS)
    return properties


def register_flight(
    paths: FlightPaths,
    airline: str,
    origin: str,
    destination: str,
    price: int,
    meals: bool = False,
) -> RouteRecord:
    """Register one flight, applying the meal policy first."""
    return paths.register_route(
        airline, origin, destination, price, derive_properties(airline, meals)
    )


def load_demo_network(paths: FlightPaths) -> int:
    """Register the fixed demo flights. Returns the number registered."""
    for airline, origin, destination, price, meals in DEMO_FLIGHTS:
        register_flight(paths, airline, origin, destination, price, meals)
    return len(DEMO_FLIGHTS)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Find minimum-hop and cheapest flight routes",
    )
    parser.add_argument("--source", default="DEL", help="Origin city (default: DEL)")
    parser.add_argument(
        "--destination", default="NYC", help="Destination city (default: NYC)"
    )
    parser.add_argument(
        "--routes",
        default=None,
        help="CSV or SQLite file with routes (default: built-in demo network)",
    )
    parser.add_argument(
        "--meals",
        action="store_true",
        help="Only search the meals-filtered routes",
    )
    parser.add_argument("--log-level", default=None, help="Logging level")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    settings = get_settings()
    setup_logging(args.log_level or settings.log_level)

    paths = FlightPaths(settings=settings)
    routes_file = args.routes or settings.routes_file
    if routes_file:
        try:
            paths.load_routes(provider_for_path(routes_file))
        except FileNotFoundError as e:
            logger.error("Cannot load routes: %s", e)
            print(f"Error: {e}", file=sys.stderr)
            return 1
    else:
        load_demo_network(paths)

    if args.meals:
        filters = [MEALS]
    else:
        # Unique, in order
        filters = list(dict.fromkeys([settings.required_property, MEALS]))

    for required_property in filters:
        suffix = f" with {required_property}" if required_property else ""
        print(f"\nSearching flights {args.source} -> {args.destination}{suffix}:")
        outcome = paths.search(args.source, args.destination, required_property)
        print(render_result(outcome))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
