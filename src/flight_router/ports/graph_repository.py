"""
Graph Repository port interface.

Defines the caching protocol for route graphs and the lookup errors
raised by graph consumers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from src.flight_router.adapters.repositories.route_graph_repo import (
        CachedRouteGraph,
    )


class GraphNotInitializedError(Exception):
    """Raised when graph is accessed before first load."""

    pass


class AirportNotFoundError(LookupError):
    """Raised when an IATA/ICAO code does not resolve to an airport."""

    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__(f"No airport with IATA/ICAO code '{code}'")


@runtime_checkable
class RouteGraphCache(Protocol):
    """
    Protocol for graph caching.

    The cache stores whole immutable snapshots. Replacing a snapshot is
    an atomic pointer swap; a snapshot is never modified in place.

    All implementations must be thread-safe for concurrent access.
    """

    def get(self) -> Optional[CachedRouteGraph]:
        """
        Get cached graph or None if miss.
        """
        ...

    def set(self, graph: CachedRouteGraph) -> None:
        """
        Store graph in cache.
        """
        ...

    @property
    def is_stale(self) -> bool:
        """
        Check if cache needs refresh.

        Returns:
            True if cache is empty or TTL has expired.
        """
        ...
