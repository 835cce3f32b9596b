"""
In-memory Data Provider.

Serves airports and routes from DataFrames supplied by the caller.
Used by tests, demos and callers that load reference data themselves.
"""

import logging
from typing import Optional

import pandas as pd

from src.flight_router.adapters.data_providers.distance import fill_route_distances
from src.flight_router.ports.route_data_provider import RouteDataProvider
from src.flight_router.schemas.airport import AirportDataFrame, AirportSchema
from src.flight_router.schemas.route import RouteDataFrame, RouteSchema

logger = logging.getLogger(__name__)


class DataFrameRouteDataProvider(RouteDataProvider):
    """Data provider backed by in-memory DataFrames."""

    def __init__(
        self,
        airports_df: pd.DataFrame,
        routes_df: Optional[pd.DataFrame] = None,
    ) -> None:
        """
        Args:
            airports_df: Airport rows (AirportSchema columns).
            routes_df: Route rows; `distance` may be missing or partly NaN.
        """
        self._airports_df = airports_df.copy()
        if routes_df is None:
            routes_df = pd.DataFrame(columns=["source_id", "destination_id", "distance"])
        self._routes_df = routes_df.copy()

    def get_airports_df(self) -> AirportDataFrame:
        return AirportSchema.validate(self._airports_df.copy())

    def get_routes_df(self) -> RouteDataFrame:
        airports_df = self.get_airports_df()
        transformed = fill_route_distances(self._routes_df, airports_df)
        validated = RouteSchema.validate(transformed)
        logger.debug("Serving %d in-memory routes", len(validated))
        return validated

    @property
    def name(self) -> str:
        return "In-memory DataFrames"
