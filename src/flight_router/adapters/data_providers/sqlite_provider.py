"""
SQLite Data Provider - SQL to DataFrame adapter.

Reads airport and route reference data from a SQLite database and
transforms it into AirportSchema/RouteSchema-compliant DataFrames.

Expected tables:
    airports(id, iata, icao, name, city, country, latitude, longitude)
    routes(source_id, destination_id, airline, distance)

`distance` may be absent or NULL; it is then computed from the
endpoint coordinates.
"""

import logging
import sqlite3
from pathlib import Path
from typing import Optional

import pandas as pd

from src.flight_router.adapters.data_providers.distance import fill_route_distances
from src.flight_router.ports.route_data_provider import RouteDataProvider
from src.flight_router.schemas.airport import AirportDataFrame, AirportSchema
from src.flight_router.schemas.route import RouteDataFrame, RouteSchema

logger = logging.getLogger(__name__)

AIRPORT_COLUMNS = ["id", "iata", "icao", "name", "city", "country", "latitude", "longitude"]
ROUTE_COLUMNS = ["source_id", "destination_id", "airline", "distance"]


class SQLiteRouteDataProvider(RouteDataProvider):
    """
    Data provider for a SQLite route network database.

    Attributes:
        _db_path: Path to the SQLite database file.
        _conn: SQLite connection (lazy initialized).
        _airports_df: Airports loaded by the last get_airports_df() call,
            reused to compute missing route distances.
    """

    def __init__(self, db_path: str = "data/routes.db") -> None:
        """
        Initialize the SQLite data provider.

        Args:
            db_path: Path to SQLite database file.
        """
        self._db_path = Path(db_path)
        self._conn: Optional[sqlite3.Connection] = None
        self._airports_df: Optional[pd.DataFrame] = None

    def _get_connection(self) -> sqlite3.Connection:
        """Get or create database connection."""
        if self._conn is None:
            if not self._db_path.exists():
                raise FileNotFoundError(f"Database not found: {self._db_path}")
            # Graph refresh runs in a worker thread
            self._conn = sqlite3.connect(str(self._db_path), check_same_thread=False)
        return self._conn

    def get_airports_df(self) -> AirportDataFrame:
        """
        Fetch airports and validate against AirportSchema.

        Returns:
            DataFrame validated against AirportSchema.
        """
        conn = self._get_connection()
        df = pd.read_sql("SELECT * FROM airports", conn)

        if df.empty:
            logger.warning("No airports found in %s", self._db_path)
            df = pd.DataFrame(columns=AIRPORT_COLUMNS)

        validated = AirportSchema.validate(df)
        self._airports_df = validated

        logger.info("Loaded %d airports from SQLite database", len(validated))
        return validated

    def get_routes_df(self) -> RouteDataFrame:
        """
        Fetch routes, fill missing distances and validate against RouteSchema.

        Returns:
            DataFrame validated against RouteSchema.
        """
        conn = self._get_connection()
        df = pd.read_sql("SELECT * FROM routes", conn)

        if df.empty:
            logger.warning("No routes found in %s", self._db_path)
            return RouteSchema.validate(pd.DataFrame(columns=ROUTE_COLUMNS))

        airports_df = self._airports_df
        if airports_df is None:
            airports_df = self.get_airports_df()

        transformed = fill_route_distances(df, airports_df)
        validated = RouteSchema.validate(transformed)

        logger.info("Loaded %d routes from SQLite database", len(validated))
        return validated

    @property
    def name(self) -> str:
        return "SQLite"

    @property
    def is_available(self) -> bool:
        """Check that the database file exists."""
        return self._db_path.exists()

    def close(self) -> None:
        """Close database connection."""
        if self._conn is not None:
            self._conn.close()
            self._conn = None
