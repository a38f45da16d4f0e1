"""
Route schemas: the flight leg record, the accumulated path, and the
Pandera contract for tabular route data.

RouteRecord and FlightPath are frozen dataclasses so that they can be
shared between concurrent searches without defensive copies.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

import pandera as pa
from pandera.typing import DataFrame, Series

# Separator for the properties column in tabular route data
PROPERTY_SEPARATOR = ";"


class RouteRecordSchema(pa.DataFrameModel):
    """
    Schema for tabular route data (one row per flight leg).

    Used at the import boundary only. Rows are converted into
    RouteRecord objects once validated.
    """

    airline: Series[str] = pa.Field(
        nullable=False,
        str_length={"min_value": 1},
        description="Operating airline name",
    )
    origin: Series[str] = pa.Field(
        nullable=False,
        str_length={"min_value": 1},
        description="Departure city code",
    )
    destination: Series[str] = pa.Field(
        nullable=False,
        str_length={"min_value": 1},
        description="Arrival city code",
    )
    price: Series[int] = pa.Field(
        ge=0,
        description="Leg price in whole currency units",
    )
    properties: Series[str] = pa.Field(
        nullable=False,
        description="Leg properties joined with ';' (empty when none)",
    )

    class Config:
        # Extra columns (flight numbers, notes) pass through unchanged
        strict = False
        coerce = True
        name = "RouteRecordSchema"


RouteDataFrame = DataFrame[RouteRecordSchema]


def parse_properties(raw: Optional[str]) -> frozenset[str]:
    """Split a ';'-joined properties cell into a frozenset of tags."""
    if not raw:
        return frozenset()
    return frozenset(
        part.strip() for part in raw.split(PROPERTY_SEPARATOR) if part.strip()
    )


@dataclass(frozen=True)
class RouteRecord:
    """
    Immutable description of one directed flight leg.

    Attributes:
        airline: Operating airline.
        origin: Departure city.
        destination: Arrival city.
        price: Leg price (non-negative integer).
        properties: Tags carried by this leg (e.g. "meals").
    """

    airline: str
    origin: str
    destination: str
    price: int
    properties: frozenset[str] = field(default_factory=frozenset)

    def has_property(self, name: str) -> bool:
        """Exact-match membership test on the property set."""
        return name in self.properties

    @classmethod
    def create(
        cls,
        airline: str,
        origin: str,
        destination: str,
        price: int,
        properties: Optional[Iterable[str]] = None,
    ) -> "RouteRecord":
        """
        Factory method that freezes any iterable of properties.

        Args:
            airline: Operating airline.
            origin: Departure city.
            destination: Arrival city.
            price: Leg price.
            properties: Property tags (set, list, or None).

        Returns:
            New RouteRecord instance.
        """
        return cls(
            airline=airline,
            origin=origin,
            destination=destination,
            price=price,
            properties=frozenset(properties or ()),
        )


@dataclass(frozen=True)
class FlightPath:
    """
    Ordered, cost-accumulating sequence of legs forming a walk.

    An empty path means "standing at the source, no flight taken yet".
    It is a valid search state but never a query result.

    extend() never mutates the receiver, so many divergent partial paths
    can live in a search frontier at once.
    """

    source: str
    legs: tuple[RouteRecord, ...] = ()
    total_cost: int = 0

    @classmethod
    def start(cls, source: str) -> "FlightPath":
        """Empty path positioned at the source city."""
        return cls(source=source)

    def extend(self, record: RouteRecord) -> "FlightPath":
        """Return a new path with record appended."""
        return FlightPath(
            source=self.source,
            legs=self.legs + (record,),
            total_cost=self.total_cost + record.price,
        )

    @property
    def hop_count(self) -> int:
        """Number of legs."""
        return len(self.legs)

    @property
    def current_city(self) -> str:
        """Destination of the last leg, or the source when empty."""
        if not self.legs:
            return self.source
        return self.legs[-1].destination

    @property
    def is_empty(self) -> bool:
        return not self.legs

    @property
    def route_cities(self) -> List[str]:
        """Ordered list of cities from source to current city."""
        return [self.source] + [leg.destination for leg in self.legs]

    def visits(self, city: str) -> bool:
        """True if city is the source or any leg's destination."""
        return city == self.source or any(leg.destination == city for leg in self.legs)
