"""
Route Data Provider port interface.

Defines the abstract contract for sources of tabular route data.
Implementations handle the specifics of each backend (CSV, SQLite, ...).
"""

from abc import ABC, abstractmethod

from src.flight_paths.schemas.route import RouteDataFrame


class RouteDataProvider(ABC):
    """
    Abstract interface for route data providers.

    Providers return validated DataFrames. Schema validation happens once
    at the boundary (in the provider), not per row.

    Implementations:
    - CsvRouteProvider: CSV file -> DataFrame
    - SqliteRouteProvider: SQLite table -> DataFrame
    """

    @abstractmethod
    def get_routes_df(self) -> RouteDataFrame:
        """
        Return all routes as a validated DataFrame.

        Rows are returned in source order, which becomes registration
        order and therefore search tie-break order.

        Returns:
            DataFrame validated against RouteRecordSchema.

        Raises:
            pandera.errors.SchemaError: If data fails validation.
            FileNotFoundError: If the data source does not exist.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Human-readable name of this data provider.

        Returns:
            Provider identifier (e.g., "CSV routes.csv").
        """
        ...
