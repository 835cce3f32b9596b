"""
Port interfaces for the route finder.

The service and application layers depend only on these ABCs and
Protocols; SQLite, in-memory tables and the search algorithm plug in
behind them as adapters.
"""

from src.flight_router.ports.graph_repository import (
    AirportNotFoundError,
    GraphNotInitializedError,
    RouteGraphCache,
)
from src.flight_router.ports.route_data_provider import RouteDataProvider
from src.flight_router.ports.route_finder import RouteFinder

__all__ = [
    "AirportNotFoundError",
    "GraphNotInitializedError",
    "RouteDataProvider",
    "RouteFinder",
    "RouteGraphCache",
]
