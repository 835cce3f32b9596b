"""
Custom exceptions for the route_graph module.

Provides a hierarchy of exceptions for clear error handling
and debugging of path-finding operations.
"""

from typing import Hashable


class RouteGraphError(Exception):
    """Base exception for all route_graph module errors."""

    pass


class ValidationError(RouteGraphError):
    """Base exception for input validation errors."""

    pass


class UnknownAirportError(ValidationError):
    """Raised when an airport id is not present in the graph."""

    def __init__(self, airport_id: Hashable, context: str = "graph") -> None:
        self.airport_id = airport_id
        message = f"Airport '{airport_id}' not found in {context}"
        super().__init__(message)


class InvalidMaxHopsError(ValidationError):
    """Raised when the hop bound is not a positive integer."""

    def __init__(self, max_hops: object) -> None:
        self.max_hops = max_hops
        message = f"max_hops must be a positive integer, got {max_hops!r}"
        super().__init__(message)


class MissingColumnsError(ValidationError):
    """Raised when required DataFrame columns are missing."""

    def __init__(self, missing: set[str], table: str = "routes") -> None:
        self.missing = missing
        columns_str = ", ".join(sorted(missing))
        message = f"Missing required {table} columns: {columns_str}"
        super().__init__(message)


class DuplicateAirportError(ValidationError):
    """Raised when the same airport id appears more than once."""

    def __init__(self, airport_ids: list) -> None:
        self.airport_ids = airport_ids
        ids_str = ", ".join(str(a) for a in airport_ids[:10])
        message = f"Duplicate airport ids: {ids_str}"
        super().__init__(message)


class DanglingRouteError(ValidationError):
    """Raised when a route references an airport that does not exist."""

    def __init__(self, airport_ids: list) -> None:
        self.airport_ids = airport_ids
        ids_str = ", ".join(str(a) for a in airport_ids[:10])
        message = f"Routes reference unknown airports: {ids_str}"
        super().__init__(message)


class NegativeDistanceError(ValidationError):
    """Raised when a route carries a negative or missing distance."""

    def __init__(self, count: int) -> None:
        self.count = count
        message = f"{count} route(s) have a negative or missing distance"
        super().__init__(message)


class NoRouteFoundError(RouteGraphError):
    """Raised when no itinerary exists within the hop bound."""

    def __init__(
        self,
        source_id: Hashable,
        destination_id: Hashable,
        max_hops: int,
    ) -> None:
        self.source_id = source_id
        self.destination_id = destination_id
        self.max_hops = max_hops
        message = (
            f"No route from '{source_id}' to '{destination_id}' "
            f"within {max_hops} hop(s)"
        )
        super().__init__(message)
