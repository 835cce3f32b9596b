"""
Schema definitions for Flight Router.

Pandera-validated DataFrames as the primary data contracts, plus the
immutable graph model built from them.
"""

from .airport import Airport, AirportDataFrame, AirportSchema
from .constraints import SearchConstraints
from .route import Itinerary, Route, RouteDataFrame, RouteSchema

__all__ = [
    # Airport schemas
    "Airport",
    "AirportSchema",
    "AirportDataFrame",
    # Constraints
    "SearchConstraints",
    # Route schemas
    "Route",
    "RouteSchema",
    "RouteDataFrame",
    "Itinerary",
]
