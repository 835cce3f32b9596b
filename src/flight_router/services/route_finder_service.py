"""
Route Finder Service - Domain orchestrator for shortest-itinerary queries.

Coordinates the interaction between:
- RouteGraphRepository (cached graph snapshots)
- RouteFinder (algorithm adapter)
- SearchConstraints (validated search parameters)
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Optional, Tuple

from src.flight_router.schemas.constraints import SearchConstraints
from src.flight_router.schemas.route import Itinerary, Route

if TYPE_CHECKING:
    from src.flight_router.adapters.repositories.route_graph_repo import (
        CachedRouteGraph,
        RouteGraphRepository,
    )
    from src.flight_router.ports.route_finder import RouteFinder

logger = logging.getLogger(__name__)


class RouteFinderService:
    """
    Domain service for route network queries.

    Orchestrates the routing process:
    1. Validates and normalizes input constraints
    2. Retrieves the current graph snapshot (non-blocking)
    3. Delegates the search to the algorithm adapter
    4. Logs performance metrics

    This service is stateless and thread-safe.

    Attributes:
        _graph_repo: Repository providing cached graph snapshots.
        _route_finder: Algorithm adapter for route finding.
    """

    def __init__(
        self,
        graph_repo: RouteGraphRepository,
        route_finder: RouteFinder,
    ) -> None:
        """
        Initialize the route finder service.

        Args:
            graph_repo: Repository for cached graph access.
            route_finder: Algorithm adapter (e.g., BoundedDijkstraRouteFinder).
        """
        self._graph_repo = graph_repo
        self._route_finder = route_finder

    def find_shortest_itinerary(
        self,
        source_id: int,
        destination_id: int,
        max_hops: Optional[int] = None,
        graph: Optional[CachedRouteGraph] = None,
    ) -> Itinerary:
        """
        Find the minimum-distance itinerary between two resolved airports.

        Args:
            source_id: Origin airport id.
            destination_id: Destination airport id.
            max_hops: Maximum routes in the itinerary (None = default).
            graph: Snapshot the ids were resolved on. None fetches the
                current one.

        Returns:
            The shortest Itinerary within the hop bound.

        Raises:
            InvalidMaxHopsError: If max_hops is not a positive integer.
            UnknownAirportError: If an id is not in the graph.
            NoRouteFoundError: If no itinerary exists within max_hops.
            GraphNotInitializedError: If graph cannot be loaded.
        """
        start_time = time.perf_counter()

        # 1. Validate and create immutable constraints
        constraints = SearchConstraints.create(
            source_id=source_id,
            destination_id=destination_id,
            max_hops=max_hops,
        )

        logger.debug(
            "Search constraints: source=%s, destination=%s, max_hops=%d",
            constraints.source_id,
            constraints.destination_id,
            constraints.max_hops,
        )

        # 2. Get graph snapshot (non-blocking after cold start)
        graph_start = time.perf_counter()
        if graph is None:
            graph = self._graph_repo.get_graph()
        graph_time = time.perf_counter() - graph_start

        logger.debug(
            "Graph retrieved in %.3fms (%d routes, %d airports)",
            graph_time * 1000,
            graph.row_count,
            graph.airport_count,
        )

        # 3. Delegate to algorithm adapter
        algo_start = time.perf_counter()
        itinerary = self._route_finder.find_itinerary(
            graph=graph,
            source_id=constraints.source_id,
            destination_id=constraints.destination_id,
            max_hops=constraints.max_hops,
        )
        algo_time = time.perf_counter() - algo_start

        total_time = time.perf_counter() - start_time

        logger.info(
            "Route search completed: %d hop(s), %.1f km in %.3fms "
            "(graph: %.3fms, algo: %.3fms)",
            itinerary.num_hops,
            itinerary.total_distance,
            total_time * 1000,
            graph_time * 1000,
            algo_time * 1000,
        )

        return itinerary

    def outbound_routes(
        self,
        airport_id: int,
        graph: Optional[CachedRouteGraph] = None,
    ) -> Tuple[Route, ...]:
        """
        Direct routes departing an airport.

        Args:
            airport_id: Resolved airport id.
            graph: Snapshot the id was resolved on. None fetches the current one.

        Returns:
            Tuple of routes; empty if the airport has no departures.
        """
        if graph is None:
            graph = self._graph_repo.get_graph()
        return graph.outbound_routes(airport_id)

    @property
    def algorithm_name(self) -> str:
        """Get name of the underlying algorithm."""
        return self._route_finder.name

    @property
    def is_ready(self) -> bool:
        """Check if service is ready to handle requests."""
        return self._graph_repo.is_initialized
