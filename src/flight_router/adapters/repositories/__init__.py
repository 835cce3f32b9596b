"""
Repository adapters for route graph caching.
"""

from src.flight_router.adapters.repositories.route_graph_repo import (
    AirportIndex,
    CachedRouteGraph,
    InMemoryRouteGraphCache,
    RouteGraphRepository,
    build_airport_index,
    build_route_graph,
)

__all__ = [
    "AirportIndex",
    "CachedRouteGraph",
    "InMemoryRouteGraphCache",
    "RouteGraphRepository",
    "build_airport_index",
    "build_route_graph",
]
