"""
Algorithm adapters for flight routing.
"""

from src.flight_router.adapters.algorithms.bounded_dijkstra_adapter import (
    BoundedDijkstraRouteFinder,
)

__all__ = ["BoundedDijkstraRouteFinder"]
