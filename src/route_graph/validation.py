"""
Input validation for the route_graph module.

Provides validation functions that check inputs before graph
construction and before every search, ensuring fail-fast behavior
with clear error messages.
"""

from numbers import Integral
from typing import Hashable, Set

import pandas as pd

from .exceptions import (
    DanglingRouteError,
    DuplicateAirportError,
    InvalidMaxHopsError,
    MissingColumnsError,
    NegativeDistanceError,
    UnknownAirportError,
)
from .graph import RouteGraph

# Required columns for the airports DataFrame
REQUIRED_AIRPORT_COLUMNS: Set[str] = {
    "id",
    "iata",
    "icao",
    "latitude",
    "longitude",
}

# Required columns for the routes DataFrame
REQUIRED_ROUTE_COLUMNS: Set[str] = {
    "source_id",
    "destination_id",
    "distance",
}


def validate_airports_df(airports_df: pd.DataFrame) -> None:
    """
    Validate the airports DataFrame structure and identity invariant.

    Args:
        airports_df: DataFrame to validate.

    Raises:
        MissingColumnsError: If required columns are missing.
        DuplicateAirportError: If an airport id appears twice.
    """
    missing_columns = REQUIRED_AIRPORT_COLUMNS - set(airports_df.columns)
    if missing_columns:
        raise MissingColumnsError(missing_columns, table="airports")

    duplicated = airports_df["id"][airports_df["id"].duplicated()]
    if not duplicated.empty:
        raise DuplicateAirportError(sorted(set(duplicated.tolist())))


def validate_routes_df(routes_df: pd.DataFrame, airport_ids: Set[Hashable]) -> None:
    """
    Validate the routes DataFrame against the loaded airports.

    An empty routes table is valid: the graph simply has no edges.

    Args:
        routes_df: DataFrame to validate.
        airport_ids: Ids of every airport in the graph.

    Raises:
        MissingColumnsError: If required columns are missing.
        NegativeDistanceError: If any distance is negative or NaN.
        DanglingRouteError: If a route endpoint is not a known airport.
    """
    missing_columns = REQUIRED_ROUTE_COLUMNS - set(routes_df.columns)
    if missing_columns:
        raise MissingColumnsError(missing_columns, table="routes")

    if routes_df.empty:
        return

    distances = pd.to_numeric(routes_df["distance"], errors="coerce")
    bad = distances.isna() | (distances < 0)
    if bad.any():
        raise NegativeDistanceError(int(bad.sum()))

    endpoints = set(routes_df["source_id"]) | set(routes_df["destination_id"])
    dangling = endpoints - airport_ids
    if dangling:
        raise DanglingRouteError(sorted(dangling, key=str))


def validate_max_hops(max_hops: object) -> None:
    """
    Validate the hop bound.

    Raises:
        InvalidMaxHopsError: If max_hops is not an integer >= 1.
    """
    if isinstance(max_hops, bool) or not isinstance(max_hops, Integral):
        raise InvalidMaxHopsError(max_hops)
    if max_hops < 1:
        raise InvalidMaxHopsError(max_hops)


def validate_airport_exists(
    airport_id: Hashable,
    graph: RouteGraph,
    context: str = "graph",
) -> None:
    """
    Validate that an airport is a node of the graph.

    Raises:
        UnknownAirportError: If airport is not found.
    """
    if not graph.has_airport(airport_id):
        raise UnknownAirportError(airport_id, context)


def validate_search_inputs(
    graph: RouteGraph,
    source_id: Hashable,
    destination_id: Hashable,
    max_hops: object,
) -> None:
    """
    Validate all inputs for the bounded-hop search.

    Args:
        graph: Graph to search.
        source_id: Origin airport id.
        destination_id: Target airport id.
        max_hops: Maximum number of routes in the itinerary.

    Raises:
        InvalidMaxHopsError: If max_hops is not a positive integer.
        UnknownAirportError: If either endpoint is missing from the graph.
    """
    # 1. Hop bound first (no graph access)
    validate_max_hops(max_hops)

    # 2. Both endpoints must be resolved nodes
    validate_airport_exists(source_id, graph, "graph (source)")
    validate_airport_exists(destination_id, graph, "graph (destination)")
