import asyncio
import functools
import logging
import os
import time
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel

# Load environment variables from .env file
load_dotenv()

from src.flight_router.application import FindShortestRoutes
from src.flight_router.application.find_shortest_routes import DEFAULT_DB_PATH
from src.flight_router.ports.graph_repository import (
    AirportNotFoundError,
    GraphNotInitializedError,
)
from src.route_graph.alg import DEFAULT_MAX_HOPS
from src.route_graph.exceptions import NoRouteFoundError, ValidationError

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
ROUTES_DB_PATH = Path(os.getenv("ROUTES_DB_PATH", DEFAULT_DB_PATH))
QUERY_TIMEOUT_SECONDS = float(os.getenv("QUERY_TIMEOUT_SECONDS", "10"))
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
    if origin.strip()
]

logging.basicConfig(
    level=LOG_LEVEL,
    format="[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
)
logger = logging.getLogger(__name__)

router = FindShortestRoutes(db_path=ROUTES_DB_PATH)

app = FastAPI(title="Flight Route Finder API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["GET"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """One access log line per request (method, path, status, duration)."""
    start = time.perf_counter()
    response = await call_next(request)
    logger.info(
        "%s %s %d - %.1f ms",
        request.method,
        request.url.path,
        response.status_code,
        (time.perf_counter() - start) * 1000,
    )
    return response


# --- Pydantic Schemas (The JSON Contract) ---


class LocationSchema(BaseModel):
    latitude: float
    longitude: float


class AirportResponse(BaseModel):
    id: int
    iata: Optional[str] = None
    icao: Optional[str] = None
    name: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None
    location: LocationSchema


class RouteResponse(BaseModel):
    source: Optional[str]
    destination: Optional[str]
    airline: Optional[str] = None
    distance: float


class HopSchema(BaseModel):
    source: Optional[str]
    destination: Optional[str]
    distance: float


class ItineraryResponse(BaseModel):
    source: Optional[str]
    destination: Optional[str]
    distance: float
    num_hops: int
    hops: List[HopSchema]


# --- Error mapping ---


@app.exception_handler(AirportNotFoundError)
async def airport_not_found_handler(request: Request, exc: AirportNotFoundError):
    return JSONResponse(
        status_code=404,
        content={"detail": "No such airport, please provide a valid IATA/ICAO code"},
    )


@app.exception_handler(NoRouteFoundError)
async def no_route_handler(request: Request, exc: NoRouteFoundError):
    return JSONResponse(status_code=404, content={"detail": "No valid routes found"})


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    # UnknownAirportError lands here: codes resolved but ids not in graph
    logger.error("Rejected query: %s", exc)
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.exception_handler(GraphNotInitializedError)
async def graph_not_ready_handler(request: Request, exc: GraphNotInitializedError):
    return JSONResponse(status_code=503, content={"detail": "Route data unavailable"})


async def run_query(func, *args, **kwargs):
    """
    Run a synchronous router call in the default executor with a deadline.

    Raises:
        HTTPException: 504 when the call exceeds QUERY_TIMEOUT_SECONDS.
    """
    loop = asyncio.get_running_loop()
    try:
        return await asyncio.wait_for(
            loop.run_in_executor(None, functools.partial(func, *args, **kwargs)),
            timeout=QUERY_TIMEOUT_SECONDS,
        )
    except asyncio.TimeoutError:
        logger.warning("Query %s%s timed out", func.__name__, args)
        raise HTTPException(status_code=504, detail="Route search timed out")


# --- API Endpoints ---


@app.get("/health", response_class=PlainTextResponse)
async def health():
    return "OK"


@app.get("/airports/{code}", response_model=AirportResponse)
async def get_airport(code: str):
    airport = await run_query(router.get_airport, code)
    return airport.to_dict()


@app.get("/routes/{source}", response_model=List[RouteResponse])
async def get_direct_routes(source: str):
    """List every direct route departing the given airport."""
    routes = await run_query(router.direct_routes, source)
    return [
        {
            "source": route.source.code,
            "destination": route.destination.code,
            "airline": route.airline,
            "distance": route.distance,
        }
        for route in routes
    ]


@app.get("/routes/{source}/{destination}", response_model=ItineraryResponse)
async def get_shortest_itinerary(
    source: str,
    destination: str,
    max_hops: int = Query(DEFAULT_MAX_HOPS, ge=1),
):
    """
    Shortest itinerary (by distance) using at most max_hops routes.
    """
    itinerary = await run_query(
        router.shortest_itinerary, source, destination, max_hops=max_hops
    )
    return itinerary.to_dict()
