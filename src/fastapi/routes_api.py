import logging
from typing import List, Optional

from fastapi import FastAPI, HTTPException, status
from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.flight_paths.adapters.data_providers.tabular_provider import provider_for_path
from src.flight_paths.application import FlightPaths
from src.flight_paths.application.logging_setup import setup_logging
from src.flight_paths.config import get_settings
from src.flight_paths.exceptions import InvalidInputError

logger = logging.getLogger(__name__)


# --- Pydantic Schemas (The JSON Contract) ---
# We define these so the API includes the @property fields in the response.


class RouteIn(BaseModel):
    airline: str
    origin: str
    destination: str
    price: int
    properties: List[str] = Field(default_factory=list)


class RouteOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)  # Allows reading from dataclasses

    airline: str
    origin: str
    destination: str
    price: int
    properties: List[str]

    @field_validator("properties", mode="before")
    @classmethod
    def _sorted_properties(cls, value):
        # frozenset has no order; sort for stable JSON
        return sorted(value)


class PathOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    source: str
    legs: List[RouteOut]
    total_cost: int
    hop_count: int  # This captures the @property
    route_cities: List[str]  # Captures @property


class SearchRequest(BaseModel):
    source: str
    destination: str
    required_property: Optional[str] = None


class SearchResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    source: str
    destination: str
    min_hops: Optional[PathOut] = None
    min_cost: Optional[PathOut] = None


# --- App factory ---


def create_app(paths: Optional[FlightPaths] = None) -> FastAPI:
    """
    Build the HTTP app around a FlightPaths engine.

    When no engine is given, one is created from settings and seeded from
    FLIGHT_PATHS_ROUTES_FILE if that is set.
    """
    if paths is None:
        settings = get_settings()
        paths = FlightPaths(settings=settings)
        if settings.routes_file:
            paths.load_routes(provider_for_path(settings.routes_file))

    app = FastAPI(title="Flight Paths API")
    app.state.paths = paths

    @app.post("/routes", response_model=RouteOut, status_code=status.HTTP_201_CREATED)
    def register_route(route: RouteIn):
        try:
            record = paths.register_route(
                route.airline,
                route.origin,
                route.destination,
                route.price,
                route.properties,
            )
        except InvalidInputError as e:
            raise HTTPException(status_code=422, detail=str(e))
        return RouteOut.model_validate(record)

    @app.get("/routes/{city}", response_model=List[RouteOut])
    def list_routes(city: str):
        return [RouteOut.model_validate(r) for r in paths.graph.neighbors(city)]

    @app.post("/search", response_model=SearchResponse)
    def search(request: SearchRequest):
        outcome = paths.search(
            request.source,
            request.destination,
            request.required_property,
        )
        if not outcome.ok:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=outcome.error)
        return SearchResponse.model_validate(outcome.result)

    @app.get("/health")
    def health():
        return {
            "status": "ok",
            "routes": paths.graph.route_count,
            "cities": len(paths.graph.cities),
        }

    return app


def build_default_app() -> FastAPI:
    """
    App wired from the environment: logging configured from settings and
    the graph seeded from FLIGHT_PATHS_ROUTES_FILE when it is set.
    """
    settings = get_settings()
    setup_logging(settings.log_level)
    return create_app()


# uvicorn src.fastapi.routes_api:app
app = build_default_app()
