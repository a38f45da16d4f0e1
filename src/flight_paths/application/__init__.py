"""
Application layer - Public API for the flight paths engine.
"""

from src.flight_paths.application.flight_paths import FlightPaths
from src.flight_paths.application.rendering import render_path, render_result

__all__ = ["FlightPaths", "render_path", "render_result"]
