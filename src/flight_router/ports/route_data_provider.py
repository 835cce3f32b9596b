"""
Route Data Provider port interface.

Defines the abstract contract for data sources that provide airport
and route reference data. Implementations handle the specifics of
different storage backends (SQLite, in-memory, etc.).
"""

from abc import ABC, abstractmethod

from src.flight_router.schemas.airport import AirportDataFrame
from src.flight_router.schemas.route import RouteDataFrame


class RouteDataProvider(ABC):
    """
    Abstract interface for route network data providers.

    Data providers return validated DataFrames directly - no object creation.
    Schema validation happens at the boundary (in the provider), not per-row.

    Implementations:
    - SQLiteRouteDataProvider: SQL -> DataFrame from a SQLite database
    - DataFrameRouteDataProvider: In-memory DataFrames (tests, demos)
    """

    @abstractmethod
    def get_airports_df(self) -> AirportDataFrame:
        """
        Return all airports as a validated DataFrame.

        Returns:
            DataFrame validated against AirportSchema.

        Raises:
            pandera.errors.SchemaError: If data fails validation.
        """
        ...

    @abstractmethod
    def get_routes_df(self) -> RouteDataFrame:
        """
        Return all routes as a validated DataFrame.

        Every row carries a non-negative distance. Providers compute it
        from airport positions when the source has none.

        Returns:
            DataFrame validated against RouteSchema.

        Raises:
            pandera.errors.SchemaError: If data fails validation.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Human-readable name of this data provider.

        Returns:
            Provider identifier (e.g., "SQLite", "In-memory DataFrames").
        """
        ...

    @property
    def is_available(self) -> bool:
        """
        Check if the data source is currently available.

        Default implementation returns True. Override for providers
        that need connection health checks.
        """
        return True
