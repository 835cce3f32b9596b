"""
Structural contracts for the graphs the path finder searches.

The algorithm never imports concrete graph classes. Anything exposing
these attributes and methods can be searched, which keeps the core
independent of how airports and routes are loaded or stored.
"""

from typing import Hashable, Protocol, Sequence, runtime_checkable


@runtime_checkable
class RouteEdge(Protocol):
    """A directed, weighted edge between two airports."""

    @property
    def source_id(self) -> Hashable: ...

    @property
    def destination_id(self) -> Hashable: ...

    @property
    def distance(self) -> float: ...


@runtime_checkable
class RouteGraph(Protocol):
    """
    Read-only graph of airports and outbound routes.

    Implementations must be immutable for the lifetime of a search and
    must return an empty sequence (never raise) from outbound_routes()
    for airports without departures.
    """

    def has_airport(self, airport_id: Hashable) -> bool: ...

    def outbound_routes(self, airport_id: Hashable) -> Sequence[RouteEdge]: ...
