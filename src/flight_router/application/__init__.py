"""
Application layer for the Flight Router.

This layer provides the public API for the routing engine.
It acts as a facade, handling dependency initialization and providing
a simple interface for consumers.
"""

from src.flight_router.application.find_shortest_routes import FindShortestRoutes

__all__ = ["FindShortestRoutes"]
