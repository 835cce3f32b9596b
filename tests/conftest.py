"""
Shared fixtures for route network tests.

Graphs are built from small DataFrames through build_route_graph so
every test exercises the same construction path as production.
"""

from typing import Callable, List, Optional, Sequence, Tuple

import pandas as pd
import pytest

from src.flight_router.adapters.repositories.route_graph_repo import (
    CachedRouteGraph,
    build_route_graph,
)

RouteRow = Tuple[str, str, float]


def airports_df_from_codes(codes: Sequence[str]) -> pd.DataFrame:
    """Airports with ids 1..n, the given IATA codes and dummy positions."""
    n = len(codes)
    return pd.DataFrame(
        {
            "id": list(range(1, n + 1)),
            "iata": list(codes),
            "icao": [None] * n,
            "latitude": [0.0] * n,
            "longitude": [float(i) for i in range(n)],
        }
    )


def routes_df_from_list(data: List[RouteRow], ids: dict) -> pd.DataFrame:
    return pd.DataFrame(
        {
            "source_id": [ids[src] for src, _, _ in data],
            "destination_id": [ids[dst] for _, dst, _ in data],
            "distance": [float(d) for _, _, d in data],
        }
    )


# -------------------------
# Graph factories
# -------------------------


@pytest.fixture
def make_graph() -> Callable[..., CachedRouteGraph]:
    """Build a CachedRouteGraph from (source, destination, distance) rows."""

    def _make(
        routes: List[RouteRow],
        codes: Optional[Sequence[str]] = None,
    ) -> CachedRouteGraph:
        if codes is None:
            codes = sorted({code for row in routes for code in row[:2]})
        airports_df = airports_df_from_codes(codes)
        ids = dict(zip(codes, airports_df["id"]))
        return build_route_graph(airports_df, routes_df_from_list(routes, ids))

    return _make


@pytest.fixture
def airport_id() -> Callable[[CachedRouteGraph, str], int]:
    """Resolve a code to its id in a test graph."""

    def _id(graph: CachedRouteGraph, code: str) -> int:
        return graph.resolve_code(code).id

    return _id


@pytest.fixture
def example_routes() -> List[RouteRow]:
    """AAA->BBB->DDD (200) competes with AAA->CCC->DDD (90)."""
    return [
        ("AAA", "BBB", 100),
        ("BBB", "DDD", 100),
        ("AAA", "CCC", 50),
        ("CCC", "DDD", 40),
    ]


@pytest.fixture
def example_graph(make_graph, example_routes) -> CachedRouteGraph:
    return make_graph(example_routes)


# -------------------------
# Realistic reference data
# -------------------------


@pytest.fixture
def sample_airports_df() -> pd.DataFrame:
    """A handful of real airports, one of them without IATA code."""
    return pd.DataFrame(
        {
            "id": [1, 2, 3, 4, 5],
            "iata": ["WAW", "LHR", "JFK", "CDG", None],
            "icao": ["EPWA", "EGLL", "KJFK", "LFPG", "EPMO"],
            "name": [
                "Warsaw Chopin",
                "Heathrow",
                "John F. Kennedy International",
                "Charles de Gaulle",
                "Warsaw Modlin",
            ],
            "city": ["Warsaw", "London", "New York", "Paris", "Warsaw"],
            "country": ["Poland", "United Kingdom", "United States", "France", "Poland"],
            "latitude": [52.1657, 51.4700, 40.6413, 49.0097, 52.4511],
            "longitude": [20.9671, -0.4543, -73.7781, 2.5479, 20.6518],
        }
    )


@pytest.fixture
def sample_routes_df() -> pd.DataFrame:
    """Directed routes; WAW->JFK has no direct flight."""
    return pd.DataFrame(
        {
            "source_id": [1, 1, 2, 4, 4, 5, 3],
            "destination_id": [2, 4, 3, 3, 1, 1, 2],
            "airline": ["LO", "AF", "BA", "AF", "LO", "LO", "BA"],
            "distance": [1466.0, 1367.0, 5540.0, 5837.0, 1367.0, 33.0, 5540.0],
        }
    )


@pytest.fixture
def sample_graph(sample_airports_df, sample_routes_df) -> CachedRouteGraph:
    return build_route_graph(sample_airports_df, sample_routes_df)
