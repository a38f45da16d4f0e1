"""
Plain-text rendering of paths and query outcomes for console output.
"""

from typing import List, Optional

from src.flight_paths.schemas.query import QueryOutcome
from src.flight_paths.schemas.route import FlightPath

NO_ROUTE_MESSAGE = "No route found"


def render_path(path: FlightPath) -> str:
    """
    Render one path as leg lines followed by the totals.

    Example:
        DEL to LON via Delta for 2000
        LON to NYC via Delta for 2000

        Total Flights = 2
        Total Cost = 4000
    """
    lines: List[str] = [
        f"{leg.origin} to {leg.destination} via {leg.airline} for {leg.price}"
        for leg in path.legs
    ]
    lines.append("")
    lines.append(f"Total Flights = {path.hop_count}")
    lines.append(f"Total Cost = {path.total_cost}")
    return "\n".join(lines) + "\n"


def _render_section(title: str, path: Optional[FlightPath]) -> str:
    body = render_path(path) if path is not None else NO_ROUTE_MESSAGE + "\n"
    return f"* {title}:\n{body}"


def render_result(outcome: QueryOutcome) -> str:
    """Render both answers of a query, or its rejection message."""
    if not outcome.ok:
        return f"Error: {outcome.error}\n"

    return "\n".join(
        [
            _render_section("Route with Minimum Hops", outcome.min_hops),
            _render_section("Cheapest Route", outcome.min_cost),
        ]
    )
