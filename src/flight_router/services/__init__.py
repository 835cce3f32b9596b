"""
Domain services for the route finder.

A service validates query parameters, takes one graph snapshot per query
and hands both to an algorithm adapter.
"""

from src.flight_router.services.route_finder_service import RouteFinderService

__all__ = ["RouteFinderService"]
