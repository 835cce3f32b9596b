"""
FindShortestRoutes Use Case - Public API for the route network.

This module provides the main entry point for the routing engine.
It acts as a Facade/Factory, handling dependency initialization,
resolving IATA/ICAO codes to airports and providing a clean interface
for consumers such as the HTTP layer.
"""

from __future__ import annotations

import logging
from datetime import timedelta
from pathlib import Path
from typing import Optional, Tuple, Union

from src.flight_router.adapters.algorithms.bounded_dijkstra_adapter import (
    BoundedDijkstraRouteFinder,
)
from src.flight_router.adapters.data_providers.sqlite_provider import (
    SQLiteRouteDataProvider,
)
from src.flight_router.adapters.repositories.route_graph_repo import (
    CachedRouteGraph,
    InMemoryRouteGraphCache,
    RouteGraphRepository,
)
from src.flight_router.ports.graph_repository import AirportNotFoundError
from src.flight_router.ports.route_data_provider import RouteDataProvider
from src.flight_router.ports.route_finder import RouteFinder
from src.flight_router.schemas.airport import Airport
from src.flight_router.schemas.route import Itinerary, Route
from src.flight_router.services.route_finder_service import RouteFinderService

logger = logging.getLogger(__name__)

# Default configuration
DEFAULT_DB_PATH = "data/routes.db"
# None: the graph is loaded once and kept for the process lifetime
DEFAULT_CACHE_TTL: Optional[timedelta] = None


class FindShortestRoutes:
    """
    Public API for route network queries.

    Example usage:
        >>> router = FindShortestRoutes()
        >>> itinerary = router.shortest_itinerary("WAW", "SYD", max_hops=3)
        >>> print(itinerary.route_codes, itinerary.total_distance)

    Attributes:
        _service: Underlying RouteFinderService.
        _graph_repo: Route graph repository (for shutdown).
    """

    def __init__(
        self,
        db_path: Optional[Union[str, Path]] = None,
        data_provider: Optional[RouteDataProvider] = None,
        route_finder: Optional[RouteFinder] = None,
        cache_ttl: Optional[timedelta] = DEFAULT_CACHE_TTL,
    ) -> None:
        """
        Initialize the router with optional custom dependencies.

        Nothing is loaded here; the graph is built on first use.

        Args:
            db_path: Path to SQLite database. Defaults to data/routes.db.
            data_provider: Custom data provider. If None, uses SQLiteRouteDataProvider.
            route_finder: Custom algorithm. If None, uses BoundedDijkstraRouteFinder.
            cache_ttl: Rebuild the graph in background after this age.
                None keeps the first graph forever.
        """
        if data_provider is not None:
            self._data_provider = data_provider
        else:
            db_path = db_path or DEFAULT_DB_PATH
            self._data_provider = SQLiteRouteDataProvider(db_path=str(db_path))

        self._cache = InMemoryRouteGraphCache(ttl=cache_ttl)
        self._graph_repo = RouteGraphRepository(
            data_provider=self._data_provider,
            cache=self._cache,
            auto_refresh=cache_ttl is not None,
        )

        self._route_finder = route_finder or BoundedDijkstraRouteFinder()

        self._service = RouteFinderService(
            graph_repo=self._graph_repo,
            route_finder=self._route_finder,
        )

        logger.info(
            "FindShortestRoutes initialized with %s algorithm (%s provider)",
            self._route_finder.name,
            self._data_provider.name,
        )

    def get_airport(self, code: str) -> Airport:
        """
        Resolve an IATA or ICAO code (case-insensitive) to an airport.

        Raises:
            AirportNotFoundError: If no airport carries the code.
        """
        return self._resolve(self._graph_repo.get_graph(), code)

    def direct_routes(self, code: str) -> Tuple[Route, ...]:
        """
        List all direct routes departing the airport with this code.

        Raises:
            AirportNotFoundError: If the code is unknown.
        """
        graph = self._graph_repo.get_graph()
        airport = self._resolve(graph, code)
        return self._service.outbound_routes(airport.id, graph=graph)

    def shortest_itinerary(
        self,
        source_code: str,
        destination_code: str,
        max_hops: Optional[int] = None,
    ) -> Itinerary:
        """
        Find the shortest itinerary between two airport codes.

        Args:
            source_code: Origin IATA/ICAO code (e.g., 'WAW' or 'EPWA').
            destination_code: Destination IATA/ICAO code.
            max_hops: Maximum number of routes (None = DEFAULT_MAX_HOPS).

        Returns:
            The shortest Itinerary within the hop bound.

        Raises:
            AirportNotFoundError: If either code is unknown.
            InvalidMaxHopsError: If max_hops is not a positive integer.
            NoRouteFoundError: If no itinerary exists within max_hops.
        """
        # Codes and search share one snapshot across a background refresh
        graph = self._graph_repo.get_graph()
        source = self._resolve(graph, source_code)
        destination = self._resolve(graph, destination_code)
        return self._service.find_shortest_itinerary(
            source_id=source.id,
            destination_id=destination.id,
            max_hops=max_hops,
            graph=graph,
        )

    def get_available_airports(self) -> frozenset[str]:
        """
        Get display codes of all addressable airports.

        Returns:
            Frozenset of IATA (or ICAO) codes.
        """
        graph = self._graph_repo.get_graph()
        return frozenset(a.code for a in graph.airports.values() if a.code is not None)

    def has_route(self, source_code: str, destination_code: str) -> bool:
        """
        Check if a direct route exists between two airport codes.

        Raises:
            AirportNotFoundError: If either code is unknown.
        """
        graph = self._graph_repo.get_graph()
        source = self._resolve(graph, source_code)
        destination = self._resolve(graph, destination_code)
        return graph.has_route(source.id, destination.id)

    @staticmethod
    def _resolve(graph: CachedRouteGraph, code: str) -> Airport:
        airport = graph.resolve_code(code)
        if airport is None:
            raise AirportNotFoundError(code)
        return airport

    @property
    def is_ready(self) -> bool:
        """Check if the router is ready to handle requests."""
        return self._service.is_ready

    @property
    def algorithm_name(self) -> str:
        """Get the name of the routing algorithm being used."""
        return self._service.algorithm_name

    def refresh_data(self) -> None:
        """Rebuild the graph in background and swap it in when done."""
        self._graph_repo.force_refresh()

    def shutdown(self) -> None:
        """
        Clean shutdown of the router.

        Closes database connections and stops background threads.
        """
        self._graph_repo.shutdown()
        if hasattr(self._data_provider, "close"):
            self._data_provider.close()
        logger.info("FindShortestRoutes shutdown complete")

    def __enter__(self) -> "FindShortestRoutes":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit with cleanup."""
        self.shutdown()
