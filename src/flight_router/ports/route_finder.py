"""
Route Finder port interface.

Defines the abstract contract for shortest-itinerary algorithms.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.flight_router.adapters.repositories.route_graph_repo import (
        CachedRouteGraph,
    )
    from src.flight_router.schemas.route import Itinerary


class RouteFinder(ABC):
    """
    Abstract interface for route finding algorithms.

    Algorithm adapters receive the full CachedRouteGraph snapshot and
    must treat it as read-only.

    Implementations:
    - BoundedDijkstraRouteFinder: Dijkstra over (airport x hops_used)
    """

    @abstractmethod
    def find_itinerary(
        self,
        graph: CachedRouteGraph,
        source_id: int,
        destination_id: int,
        max_hops: int,
    ) -> Itinerary:
        """
        Find the minimum-distance itinerary within the hop bound.

        Args:
            graph: Immutable graph snapshot.
            source_id: Resolved origin airport id.
            destination_id: Resolved destination airport id.
            max_hops: Maximum number of routes traversed.

        Returns:
            The shortest Itinerary (empty if source is destination).

        Raises:
            UnknownAirportError: If an id is not a node of the graph.
            NoRouteFoundError: If no itinerary exists within max_hops.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Algorithm identifier.

        Returns:
            Human-readable algorithm name.
        """
        ...
