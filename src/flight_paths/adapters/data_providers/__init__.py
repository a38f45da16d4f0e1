"""
Data provider adapters for tabular route sources.
"""

from src.flight_paths.adapters.data_providers.tabular_provider import (
    CsvRouteProvider,
    SqliteRouteProvider,
    provider_for_path,
)

__all__ = ["CsvRouteProvider", "SqliteRouteProvider", "provider_for_path"]
