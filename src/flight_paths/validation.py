"""
Input validation for route registration and route queries.

Provides validation functions that run at the service boundary, before
anything touches the graph, for fail-fast behavior with clear messages.
"""

from src.flight_paths.exceptions import InvalidInputError, InvalidQueryError


def validate_city(value: str, field: str) -> None:
    """
    Validate a city name.

    Args:
        value: City name to check.
        field: Field name for the error message.

    Raises:
        InvalidInputError: If the value is not a non-blank string.
    """
    if not isinstance(value, str) or not value.strip():
        raise InvalidInputError(f"{field} must be a non-empty string", field=field)


def validate_price(price: int) -> None:
    """
    Validate a leg price.

    Raises:
        InvalidInputError: If price is not an integer or is negative.
    """
    # bool is an int subclass; True is not a price
    if isinstance(price, bool) or not isinstance(price, int):
        raise InvalidInputError(
            f"price must be an integer, got {type(price).__name__}", field="price"
        )
    if price < 0:
        raise InvalidInputError(f"price must be >= 0, got {price}", field="price")


def validate_route_input(
    airline: str,
    origin: str,
    destination: str,
    price: int,
) -> None:
    """
    Validate all inputs for a route registration.

    Checks run cheapest first.

    Raises:
        InvalidInputError: On the first malformed field.
    """
    validate_city(airline, "airline")
    validate_city(origin, "origin")
    validate_city(destination, "destination")
    validate_price(price)


def validate_query(source: str, destination: str) -> None:
    """
    Validate a route query.

    Raises:
        InvalidQueryError: If either city is blank, or both are the same.
    """
    for value in (source, destination):
        if not isinstance(value, str) or not value.strip():
            raise InvalidQueryError(
                source,
                destination,
                "Source and destination must be non-empty.",
            )
    if source == destination:
        raise InvalidQueryError(source, destination)
