"""
Tabular Route Providers - CSV and SQLite to DataFrame adapters.

Reads route tables, normalises them, validates them against
RouteRecordSchema and converts rows into RouteRecord objects.
"""

import logging
import sqlite3
from pathlib import Path
from typing import List, Union

import pandas as pd

from src.flight_paths.ports.route_data_provider import RouteDataProvider
from src.flight_paths.schemas.route import (
    RouteDataFrame,
    RouteRecord,
    RouteRecordSchema,
    parse_properties,
)

logger = logging.getLogger(__name__)

ROUTE_COLUMNS = ["airline", "origin", "destination", "price", "properties"]


def normalise_routes_df(df: pd.DataFrame) -> RouteDataFrame:
    """
    Prepare a raw route table and validate it.

    Adds an empty properties column when absent, turns missing property
    cells into empty strings and strips whitespace from city names.

    Args:
        df: Raw DataFrame with at least airline/origin/destination/price.

    Returns:
        DataFrame validated against RouteRecordSchema.

    Raises:
        pandera.errors.SchemaError: If data fails validation.
    """
    df = df.copy()
    if "properties" not in df.columns:
        df["properties"] = ""
    df["properties"] = df["properties"].fillna("").astype(str)

    for column in ("airline", "origin", "destination"):
        if column in df.columns:
            df[column] = df[column].where(df[column].isna(), df[column].astype(str).str.strip())

    return RouteRecordSchema.validate(df)


def records_from_df(df: RouteDataFrame) -> List[RouteRecord]:
    """
    Convert validated rows into RouteRecords, keeping row order.

    Args:
        df: DataFrame validated against RouteRecordSchema.

    Returns:
        One RouteRecord per row.
    """
    return [
        RouteRecord(
            airline=str(airline),
            origin=str(origin),
            destination=str(destination),
            price=int(price),
            properties=parse_properties(properties),
        )
        for airline, origin, destination, price, properties in zip(
            df["airline"],
            df["origin"],
            df["destination"],
            df["price"],
            df["properties"],
        )
    ]


class CsvRouteProvider(RouteDataProvider):
    """
    Data provider for a CSV route table.

    Expected header: airline,origin,destination,price[,properties]
    where properties is a ';'-joined list of tags.

    Attributes:
        _path: Path to the CSV file.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self._path = Path(path)

    def get_routes_df(self) -> RouteDataFrame:
        """Read and validate the CSV file."""
        if not self._path.exists():
            raise FileNotFoundError(f"Routes file not found: {self._path}")

        df = pd.read_csv(self._path, dtype={"properties": "string"}, keep_default_na=True)
        logger.info("Loaded %d routes from %s", len(df), self._path)
        return normalise_routes_df(df)

    @property
    def name(self) -> str:
        return f"CSV {self._path.name}"


class SqliteRouteProvider(RouteDataProvider):
    """
    Data provider for a SQLite route table.

    Rows are read in rowid order so registration order matches insertion
    order in the database.

    Attributes:
        _db_path: Path to the SQLite database file.
        _table: Table holding the route columns.
    """

    def __init__(self, db_path: Union[str, Path], table: str = "routes") -> None:
        if not table.isidentifier():
            raise ValueError(f"Invalid table name: {table!r}")
        self._db_path = Path(db_path)
        self._table = table

    def get_routes_df(self) -> RouteDataFrame:
        """Read and validate the routes table."""
        if not self._db_path.exists():
            raise FileNotFoundError(f"Database not found: {self._db_path}")

        conn = sqlite3.connect(str(self._db_path))
        try:
            df = pd.read_sql_query(
                f"SELECT * FROM {self._table} ORDER BY rowid",
                conn,
            )
        finally:
            conn.close()

        logger.info("Loaded %d routes from %s:%s", len(df), self._db_path, self._table)
        return normalise_routes_df(df)

    @property
    def name(self) -> str:
        return f"SQLite {self._db_path.name}:{self._table}"


def provider_for_path(path: Union[str, Path]) -> RouteDataProvider:
    """
    Pick a provider from the file extension.

    .db/.sqlite/.sqlite3 files are read as SQLite, everything else as CSV.
    """
    path = Path(path)
    if path.suffix.lower() in {".db", ".sqlite", ".sqlite3"}:
        return SqliteRouteProvider(path)
    return CsvRouteProvider(path)
