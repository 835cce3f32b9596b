"""
Tests for reconstruction module.

Tests path reconstruction from back-pointer tables and path rendering.
"""

from dataclasses import dataclass

import pytest

from src.route_graph.labels import Label
from src.route_graph.reconstruction import describe_path, reconstruct_path


@dataclass(frozen=True)
class Edge:
    """Minimal RouteEdge implementation."""

    source_id: str
    destination_id: str
    distance: float


# -------------------------
# Fixtures
# -------------------------


@pytest.fixture
def edges():
    return {
        "ab": Edge("A", "B", 50.0),
        "bc": Edge("B", "C", 75.0),
        "ca": Edge("C", "A", 60.0),
    }


@pytest.fixture
def round_trip_parents(edges):
    """A -> B -> C -> A, the start and end airport differ only in hops."""
    return {
        ("B", 1): (("A", 0), edges["ab"]),
        ("C", 2): (("B", 1), edges["bc"]),
        ("A", 3): (("C", 2), edges["ca"]),
    }


# -------------------------
# reconstruct_path tests
# -------------------------


class TestReconstructPath:
    """Tests for reconstruct_path function."""

    def test_start_label_has_empty_path(self):
        """The start state has no predecessor."""
        label = Label(airport_id="A", hops=0, distance=0.0)

        assert reconstruct_path(label, {}) == []

    def test_single_route(self, edges):
        parents = {("B", 1): (("A", 0), edges["ab"])}
        label = Label(airport_id="B", hops=1, distance=50.0)

        assert reconstruct_path(label, parents) == [edges["ab"]]

    def test_routes_in_travel_order(self, edges, round_trip_parents):
        """Routes come back from origin to destination."""
        label = Label(airport_id="C", hops=2, distance=125.0)

        path = reconstruct_path(label, round_trip_parents)

        assert path == [edges["ab"], edges["bc"]]

    def test_revisited_airport_keyed_by_hops(self, edges, round_trip_parents):
        """(A, 3) walks back to (A, 0) instead of stopping at A."""
        label = Label(airport_id="A", hops=3, distance=185.0)

        path = reconstruct_path(label, round_trip_parents)

        assert [e.source_id for e in path] == ["A", "B", "C"]
        assert path[-1].destination_id == "A"

    def test_ignores_unrelated_entries(self, edges):
        """Other branches in the table do not leak into the path."""
        parents = {
            ("B", 1): (("A", 0), edges["ab"]),
            ("C", 1): (("A", 0), Edge("A", "C", 500.0)),
        }
        label = Label(airport_id="B", hops=1, distance=50.0)

        assert reconstruct_path(label, parents) == [edges["ab"]]


# -------------------------
# describe_path tests
# -------------------------


class TestDescribePath:
    """Tests for describe_path function."""

    def test_empty_path(self):
        assert describe_path([]) == "(empty itinerary)"

    def test_single_route(self, edges):
        assert describe_path([edges["ab"]]) == "A -> B (50.0 km)"

    def test_multi_route_sums_distance(self, edges):
        text = describe_path([edges["ab"], edges["bc"], edges["ca"]])

        assert text == "A -> B -> C -> A (185.0 km)"
