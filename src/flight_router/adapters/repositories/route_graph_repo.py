"""
Route Graph Repository - Immutable Cached Graph Infrastructure.

Implements the route network snapshot and its lifecycle:
- Zero-copy index-based adjacency via AirportIndex
- Numpy-vectorized index building (GIL-free)
- Case-insensitive IATA/ICAO code index
- Snapshot cache with optional background rebuilds
"""

from __future__ import annotations

import hashlib
import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from itertools import repeat
from types import MappingProxyType
from typing import TYPE_CHECKING, Dict, Iterable, Mapping, Optional, Tuple

import numpy as np
import pandas as pd

if TYPE_CHECKING:
    from src.flight_router.ports.route_data_provider import RouteDataProvider

from src.flight_router.adapters.repositories.immutability import (
    is_immutable,
    make_immutable,
)
from src.flight_router.ports.graph_repository import GraphNotInitializedError
from src.flight_router.schemas.airport import Airport
from src.flight_router.schemas.route import Route
from src.route_graph.exceptions import UnknownAirportError
from src.route_graph.validation import validate_airports_df, validate_routes_df

logger = logging.getLogger(__name__)


# =============================================================================
# AIRPORT INDEX: Zero-copy index for O(1) outbound route access
# =============================================================================


@dataclass(frozen=True)
class AirportIndex:
    """
    Zero-copy index for O(1) airport-based route access.

    Stores the start and end indices (exclusive) for routes departing
    from a specific airport in the sorted route table.

    Attributes:
        start: Start index in sorted routes (inclusive).
        end: End index in sorted routes (exclusive).
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate index bounds."""
        if self.start < 0:
            raise ValueError(f"start must be >= 0, got {self.start}")
        if self.end < self.start:
            raise ValueError(f"end ({self.end}) must be >= start ({self.start})")

    def __len__(self) -> int:
        return self.end - self.start


def build_airport_index(df: pd.DataFrame) -> Dict[int, AirportIndex]:
    """
    Build index from pre-sorted routes using VECTORIZED numpy operations.

    The algorithm:
    1. Get numpy array of source_id values
    2. Create boolean mask where the source changes (vectorized comparison)
    3. Find indices where changes occur using np.where
    4. Build AirportIndex entries from boundary positions

    Memory: O(num_airports) - just integer pairs, not data copies.

    Args:
        df: Routes DataFrame MUST be pre-sorted by 'source_id'.
            Index should be reset (0, 1, 2, ...).

    Returns:
        Dict mapping airport id to AirportIndex with (start, end) range.

    Example:
        >>> df = pd.DataFrame({
        ...     'source_id': [1, 1, 2, 2, 2],
        ...     'destination_id': [2, 3, 1, 3, 4],
        ...     'distance': [100.0, 200.0, 100.0, 150.0, 300.0],
        ... })
        >>> index = build_airport_index(df)
        >>> index[1]
        AirportIndex(start=0, end=2)
        >>> index[2]
        AirportIndex(start=2, end=5)
    """
    if df.empty:
        return {}

    sources = df["source_id"].to_numpy()
    n = len(sources)

    # First element is always a boundary
    change_mask = np.concatenate([[True], sources[1:] != sources[:-1]])
    change_indices = np.where(change_mask)[0]

    index: Dict[int, AirportIndex] = {}
    num_boundaries = len(change_indices)

    for i in range(num_boundaries):
        start = int(change_indices[i])
        end = int(change_indices[i + 1]) if i + 1 < num_boundaries else n
        index[int(sources[start])] = AirportIndex(start=start, end=end)

    return index


def build_code_index(airports: Iterable[Airport]) -> Dict[str, Airport]:
    """
    Map lowercased IATA and ICAO codes to airports.

    The first airport claiming a code keeps it; later duplicates are
    logged and ignored so lookups are deterministic.
    """
    codes: Dict[str, Airport] = {}
    duplicates = 0

    for airport in airports:
        for code in (airport.iata, airport.icao):
            if code is None:
                continue
            key = code.lower()
            if key in codes and codes[key].id != airport.id:
                duplicates += 1
                continue
            codes[key] = airport

    if duplicates:
        logger.warning("Ignored %d duplicate airport code(s)", duplicates)

    return codes


def _clean_optional_str(value) -> Optional[str]:
    """Normalize NaN/None/blank values from DataFrames to None."""
    if value is None:
        return None
    if not isinstance(value, str) and pd.isna(value):
        return None
    text = str(value).strip()
    return text or None


# =============================================================================
# CACHED ROUTE GRAPH: Immutable snapshot shared by all queries
# =============================================================================


@dataclass(frozen=True, eq=False)
class CachedRouteGraph:
    """
    Immutable route network snapshot.

    Key optimization: routes are sorted by source_id, so each airport's
    outbound routes are one contiguous slice of `routes`.

    The graph stores:
    - Read-only airport and route tables (airports_df, routes_df)
    - Route objects in the same order as routes_df
    - Lightweight index (airport_index) mapping airports to slices
    - Code index for case-insensitive IATA/ICAO resolution

    Attributes:
        airports_df: Airport table, read-only.
        routes_df: Route table SORTED by source_id, index reset, read-only.
        airports: Read-only mapping airport id -> Airport.
        routes: All routes, aligned with routes_df rows.
        airport_index: Read-only mapping airport id -> AirportIndex.
        codes: Read-only mapping lowercased code -> Airport.
        built_at: Timestamp when graph was built.
        version: Fingerprint of the source tables (shape and end rows).
        row_count: Number of routes in graph.
    """

    airports_df: pd.DataFrame
    routes_df: pd.DataFrame
    airports: Mapping[int, Airport]
    routes: Tuple[Route, ...]
    airport_index: Mapping[int, AirportIndex]
    codes: Mapping[str, Airport]
    built_at: datetime = field(default_factory=datetime.now)
    version: str = ""
    row_count: int = 0

    def outbound_routes(self, airport_id: int) -> Tuple[Route, ...]:
        """
        O(1) lookup of routes departing from an airport.

        Args:
            airport_id: Airport identity.

        Returns:
            Tuple of outbound routes. Empty tuple for airports without
            departures or ids not in the graph.
        """
        idx = self.airport_index.get(airport_id)
        if idx is None:
            return ()
        return self.routes[idx.start : idx.end]

    def has_airport(self, airport_id: int) -> bool:
        """Check if airport is a node of this graph."""
        return airport_id in self.airports

    def get_airport(self, airport_id: int) -> Airport:
        """
        Get airport by id.

        Raises:
            UnknownAirportError: If the id is not in the graph.
        """
        try:
            return self.airports[airport_id]
        except KeyError:
            raise UnknownAirportError(airport_id) from None

    def resolve_code(self, code: str) -> Optional[Airport]:
        """Case-insensitive IATA/ICAO lookup, None if unknown."""
        return self.codes.get(code.strip().lower())

    def has_route(self, source_id: int, destination_id: int) -> bool:
        """Check if a direct route exists."""
        return any(
            route.destination_id == destination_id
            for route in self.outbound_routes(source_id)
        )

    @property
    def airport_count(self) -> int:
        return len(self.airports)

    @property
    def is_read_only(self) -> bool:
        """True if both tables have read-only backing arrays."""
        return is_immutable(self.airports_df) and is_immutable(self.routes_df)


def _compute_version(airports_df: pd.DataFrame, routes_df: pd.DataFrame) -> str:
    """Compute hash of the tables for version tracking."""
    # Shape plus first and last rows for fast change detection
    content = f"{len(airports_df)}:{len(routes_df)}:{routes_df.columns.tolist()}"
    if len(routes_df) > 0:
        content += f":{routes_df.iloc[0].to_dict()}:{routes_df.iloc[-1].to_dict()}"
    return hashlib.md5(content.encode()).hexdigest()[:12]


def build_route_graph(
    airports_df: pd.DataFrame,
    routes_df: pd.DataFrame,
) -> CachedRouteGraph:
    """
    Build an immutable graph snapshot from airport and route tables.

    Steps:
    1. Validate structure, identity and route endpoints
    2. Sort routes by source_id for index-based access
    3. Build lightweight airport index
    4. Materialize Airport and Route objects (routes reference airports)
    5. Build the code index and freeze the tables

    Args:
        airports_df: Airports (AirportSchema columns).
        routes_df: Routes (RouteSchema columns), any order.

    Returns:
        Newly built CachedRouteGraph.

    Raises:
        MissingColumnsError, DuplicateAirportError, DanglingRouteError,
        NegativeDistanceError: If the tables violate graph invariants.
    """
    # 1. Validate
    validate_airports_df(airports_df)
    airport_ids = {int(a) for a in airports_df["id"]}
    validate_routes_df(routes_df, airport_ids)

    # 2. Sort (stable keeps provider order among parallel routes)
    airports_df = airports_df.reset_index(drop=True)
    routes_df = routes_df.sort_values("source_id", kind="stable").reset_index(drop=True)

    # 3. Index
    airport_index = build_airport_index(routes_df)

    # 4. Objects
    def optional_column(name: str, df: pd.DataFrame) -> Iterable:
        return df[name] if name in df.columns else repeat(None, len(df))

    airports: Dict[int, Airport] = {}
    for airport_id, iata, icao, lat, lon, name, city, country in zip(
        airports_df["id"],
        airports_df["iata"],
        airports_df["icao"],
        airports_df["latitude"],
        airports_df["longitude"],
        optional_column("name", airports_df),
        optional_column("city", airports_df),
        optional_column("country", airports_df),
    ):
        airports[int(airport_id)] = Airport(
            id=int(airport_id),
            iata=_clean_optional_str(iata),
            icao=_clean_optional_str(icao),
            latitude=float(lat),
            longitude=float(lon),
            name=_clean_optional_str(name),
            city=_clean_optional_str(city),
            country=_clean_optional_str(country),
        )

    routes = tuple(
        Route(
            source=airports[int(source_id)],
            destination=airports[int(destination_id)],
            distance=float(distance),
            airline=_clean_optional_str(airline),
        )
        for source_id, destination_id, distance, airline in zip(
            routes_df["source_id"],
            routes_df["destination_id"],
            routes_df["distance"],
            optional_column("airline", routes_df),
        )
    )

    # 5. Codes + freeze
    codes = build_code_index(airports.values())
    make_immutable(airports_df)
    make_immutable(routes_df)

    unaddressable = sum(1 for a in airports.values() if not a.is_addressable)
    if unaddressable:
        logger.warning("%d airport(s) have neither IATA nor ICAO code", unaddressable)

    return CachedRouteGraph(
        airports_df=airports_df,
        routes_df=routes_df,
        airports=MappingProxyType(airports),
        routes=routes,
        airport_index=MappingProxyType(airport_index),
        codes=MappingProxyType(codes),
        built_at=datetime.now(),
        version=_compute_version(airports_df, routes_df),
        row_count=len(routes_df),
    )


# =============================================================================
# IN-MEMORY CACHE: per-process snapshot holder
# =============================================================================


class InMemoryRouteGraphCache:
    """
    Holds the current snapshot of one worker process.

    Every uvicorn worker builds and keeps its own graph. With ``ttl=None``
    a stored snapshot never goes stale.
    """

    def __init__(self, ttl: Optional[timedelta] = None) -> None:
        self._ttl = ttl
        self._graph: Optional[CachedRouteGraph] = None
        self._lock = threading.Lock()

    def get(self) -> Optional[CachedRouteGraph]:
        with self._lock:
            return self._graph

    def set(self, graph: CachedRouteGraph) -> None:
        with self._lock:
            self._graph = graph

    @property
    def is_stale(self) -> bool:
        """True when nothing is stored or the snapshot outlived the ttl."""
        graph = self.get()
        if graph is None:
            return True
        return self._ttl is not None and datetime.now() - graph.built_at > self._ttl


# =============================================================================
# ROUTE GRAPH REPOSITORY: cold start plus background rebuilds
# =============================================================================


class RouteGraphRepository:
    """
    Owns the lifecycle of graph snapshots.

    The first get_graph() call builds a snapshot and blocks. After that
    readers get the cached snapshot at once; a stale one is replaced by a
    single background build, and a failed build leaves the previous
    snapshot in service.

    Usage:
        >>> provider = SQLiteRouteDataProvider("data/routes.db")
        >>> repo = RouteGraphRepository(provider, InMemoryRouteGraphCache())
        >>> graph = repo.get_graph()
    """

    def __init__(
        self,
        data_provider: RouteDataProvider,
        cache: InMemoryRouteGraphCache,
        auto_refresh: bool = False,
    ) -> None:
        """
        Args:
            data_provider: Source of the airports and routes tables.
            cache: Snapshot holder (InMemoryRouteGraphCache or Protocol impl).
            auto_refresh: Rebuild in background once the cache is stale.
        """
        self._provider = data_provider
        self._cache = cache
        self._auto_refresh = auto_refresh

        self._lock = threading.Lock()
        self._pending: Optional[Future] = None
        self._executor = ThreadPoolExecutor(
            max_workers=1, thread_name_prefix="graph-refresh"
        )

    def get_graph(self) -> CachedRouteGraph:
        """
        Current graph snapshot.

        Raises:
            GraphNotInitializedError: If the cold-start build fails.
        """
        graph = self._cache.get()
        if graph is None:
            return self._cold_start()

        if self._auto_refresh and self._cache.is_stale:
            self.force_refresh()
        return graph

    def force_refresh(self) -> None:
        """Schedule a background rebuild unless one is already pending."""
        with self._lock:
            if self._pending is not None and not self._pending.done():
                return
            self._pending = self._executor.submit(self._refresh)

    def shutdown(self) -> None:
        """Wait for a pending rebuild and stop the worker thread."""
        self._executor.shutdown(wait=True)

    @property
    def is_initialized(self) -> bool:
        """True once a snapshot has been built."""
        return self._cache.get() is not None

    def _cold_start(self) -> CachedRouteGraph:
        with self._lock:
            # Another request may have finished the build while we waited
            graph = self._cache.get()
            if graph is not None:
                return graph

            try:
                graph = self._build_graph()
            except Exception as e:
                logger.error("Cold start failed: %s", e)
                raise GraphNotInitializedError(
                    f"Failed to initialize route graph: {e}"
                ) from e
            self._cache.set(graph)

        logger.info(
            "Initial graph loaded from %s: %d routes, %d airports (version %s)",
            self._provider.name,
            graph.row_count,
            graph.airport_count,
            graph.version,
        )
        return graph

    def _refresh(self) -> None:
        """Runs on the worker thread; swaps the new snapshot in whole."""
        try:
            graph = self._build_graph()
        except Exception as e:
            logger.error("Background refresh failed, keeping current graph: %s", e)
            return

        self._cache.set(graph)
        logger.info(
            "Background refresh completed: %d routes, %d airports (version %s)",
            graph.row_count,
            graph.airport_count,
            graph.version,
        )

    def _build_graph(self) -> CachedRouteGraph:
        return build_route_graph(
            self._provider.get_airports_df(), self._provider.get_routes_df()
        )
