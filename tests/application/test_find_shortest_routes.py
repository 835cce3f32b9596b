"""
Tests for the FindShortestRoutes facade.
"""

import sqlite3
from datetime import timedelta
from unittest.mock import MagicMock, patch

import pytest

from src.flight_router.adapters.data_providers import DataFrameRouteDataProvider
from src.flight_router.adapters.repositories.route_graph_repo import build_route_graph
from src.flight_router.application import FindShortestRoutes
from src.flight_router.ports.graph_repository import (
    AirportNotFoundError,
    GraphNotInitializedError,
)
from src.flight_router.ports.route_finder import RouteFinder
from src.route_graph.exceptions import InvalidMaxHopsError, NoRouteFoundError


@pytest.fixture
def router(sample_airports_df, sample_routes_df):
    provider = DataFrameRouteDataProvider(sample_airports_df, sample_routes_df)
    with FindShortestRoutes(data_provider=provider) as router:
        yield router


class TestAirportLookup:
    """Tests for code resolution."""

    @pytest.mark.parametrize("code", ["JFK", "jfk", "KJFK"])
    def test_get_airport(self, router, code):
        assert router.get_airport(code).id == 3

    def test_unknown_code(self, router):
        with pytest.raises(AirportNotFoundError) as exc_info:
            router.get_airport("ZZZ")

        assert exc_info.value.code == "ZZZ"
        assert isinstance(exc_info.value, LookupError)

    def test_available_airports(self, router):
        assert router.get_available_airports() == frozenset(
            {"WAW", "LHR", "JFK", "CDG", "EPMO"}
        )

    def test_has_route(self, router):
        assert router.has_route("WAW", "LHR")
        assert not router.has_route("LHR", "WAW")


class TestDirectRoutes:
    """Tests for direct_routes."""

    def test_direct_routes(self, router):
        routes = router.direct_routes("cdg")

        assert {r.destination.code for r in routes} == {"JFK", "WAW"}

    def test_airport_without_departures(self, sample_airports_df, sample_routes_df):
        routes = sample_routes_df[sample_routes_df["source_id"] != 3]
        provider = DataFrameRouteDataProvider(sample_airports_df, routes)

        with FindShortestRoutes(data_provider=provider) as router:
            assert router.direct_routes("JFK") == ()

    def test_unknown_code(self, router):
        with pytest.raises(AirportNotFoundError):
            router.direct_routes("ZZZ")


class TestShortestItinerary:
    """Tests for shortest_itinerary."""

    def test_default_hop_bound(self, router):
        itinerary = router.shortest_itinerary("WAW", "JFK")

        assert itinerary.route_codes == ["WAW", "LHR", "JFK"]
        assert itinerary.total_distance == 7006.0

    def test_hop_bound(self, router):
        with pytest.raises(NoRouteFoundError):
            router.shortest_itinerary("EPMO", "JFK", max_hops=2)

        assert router.shortest_itinerary("EPMO", "JFK", max_hops=3).num_hops == 3

    def test_invalid_hop_bound(self, router):
        with pytest.raises(InvalidMaxHopsError):
            router.shortest_itinerary("WAW", "JFK", max_hops=0)

    def test_unknown_code(self, router):
        with pytest.raises(AirportNotFoundError):
            router.shortest_itinerary("WAW", "ZZZ")

    def test_same_airport(self, router):
        assert router.shortest_itinerary("waw", "EPWA").is_empty

    def test_custom_route_finder(self, sample_airports_df, sample_routes_df):
        finder = MagicMock(spec=RouteFinder)
        finder.name = "Custom"
        provider = DataFrameRouteDataProvider(sample_airports_df, sample_routes_df)

        with FindShortestRoutes(data_provider=provider, route_finder=finder) as router:
            assert router.algorithm_name == "Custom"


class TestLifecycle:
    """Tests for lazy loading, refresh and shutdown."""

    def test_lazy_loading(self, router):
        assert router.is_ready is False

        router.get_airport("WAW")

        assert router.is_ready is True

    def test_algorithm_name(self, router):
        assert router.algorithm_name == "Bounded-Hop Dijkstra"

    def test_missing_database(self, tmp_path):
        with FindShortestRoutes(db_path=tmp_path / "nope.db") as router:
            with pytest.raises(GraphNotInitializedError):
                router.get_airport("WAW")

    def test_sqlite_end_to_end(self, tmp_path):
        db_path = tmp_path / "routes.db"
        conn = sqlite3.connect(db_path)
        conn.execute(
            "CREATE TABLE airports (id INTEGER, iata TEXT, icao TEXT, "
            "latitude REAL, longitude REAL)"
        )
        conn.execute("CREATE TABLE routes (source_id INTEGER, destination_id INTEGER)")
        conn.executemany(
            "INSERT INTO airports VALUES (?, ?, ?, ?, ?)",
            [
                (1, "AAA", None, 0.0, 0.0),
                (2, "BBB", None, 1.0, 1.0),
                (3, "CCC", None, 0.0, 3.0),
            ],
        )
        conn.executemany("INSERT INTO routes VALUES (?, ?)", [(1, 2), (2, 3), (1, 3)])
        conn.commit()
        conn.close()

        with FindShortestRoutes(db_path=db_path) as router:
            itinerary = router.shortest_itinerary("AAA", "CCC")

        # Distances come from coordinates; the detour through BBB is longer
        assert itinerary.route_codes == ["AAA", "CCC"]
        assert itinerary.total_distance == pytest.approx(3 * 111.195, rel=1e-3)

    def test_refresh_swaps_in_new_graph(self, router):
        first = router.get_airport("WAW")

        router.refresh_data()
        router.shutdown()

        second = router.get_airport("WAW")
        assert second == first
        assert second is not first

    def test_cache_ttl_enables_auto_refresh(self, sample_airports_df):
        provider = DataFrameRouteDataProvider(sample_airports_df)

        with FindShortestRoutes(
            data_provider=provider, cache_ttl=timedelta(minutes=5)
        ) as router:
            assert router.get_available_airports()


class TestSnapshotConsistency:
    """A query keeps the snapshot its codes were resolved on."""

    @pytest.fixture
    def snapshots(self, sample_airports_df, sample_routes_df):
        # Same network, every airport id shifted
        airports = sample_airports_df.assign(id=sample_airports_df["id"] + 100)
        routes = sample_routes_df.assign(
            source_id=sample_routes_df["source_id"] + 100,
            destination_id=sample_routes_df["destination_id"] + 100,
        )
        return (
            build_route_graph(sample_airports_df, sample_routes_df),
            build_route_graph(airports, routes),
        )

    def test_shortest_itinerary(self, router, snapshots):
        old, renumbered = snapshots

        with patch.object(
            router._graph_repo, "get_graph", side_effect=[old, renumbered, renumbered]
        ) as get_graph:
            itinerary = router.shortest_itinerary("WAW", "CDG")

        get_graph.assert_called_once()
        assert itinerary.route_codes == ["WAW", "CDG"]
        assert itinerary.source.id == 1

    def test_direct_routes(self, router, snapshots):
        old, renumbered = snapshots

        with patch.object(
            router._graph_repo, "get_graph", side_effect=[old, renumbered]
        ) as get_graph:
            routes = router.direct_routes("WAW")

        get_graph.assert_called_once()
        assert {r.destination.id for r in routes} == {2, 4}

    def test_has_route(self, router, snapshots):
        old, renumbered = snapshots

        with patch.object(
            router._graph_repo, "get_graph", side_effect=[old, renumbered]
        ):
            assert router.has_route("WAW", "LHR")
