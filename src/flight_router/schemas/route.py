"""
Route and itinerary schemas using Pandera.

Defines the contract for route data (graph edges) and the output
type of the path finder.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence

import pandera as pa
from pandera.typing import DataFrame, Series

from src.flight_router.schemas.airport import Airport


class RouteSchema(pa.DataFrameModel):
    """
    Core contract for route rows.

    Routes are directed: a row A -> B says nothing about B -> A.
    Parallel rows between the same pair are allowed.
    """

    source_id: Series[int] = pa.Field(
        description="Departure airport id",
    )
    destination_id: Series[int] = pa.Field(
        description="Arrival airport id",
    )
    distance: Series[float] = pa.Field(
        ge=0,
        description="Great-circle distance in kilometers",
    )
    airline: Optional[Series[str]] = pa.Field(
        nullable=True,
        description="Operating airline code",
    )

    class Config:
        strict = False
        coerce = True
        name = "RouteSchema"
        description = "Route data (directed weighted edges)"


RouteDataFrame = DataFrame[RouteSchema]


@dataclass(frozen=True)
class Route:
    """
    Immutable directed edge between two airports.

    Holds references to the graph's Airport objects, never copies.
    """

    source: Airport
    destination: Airport
    distance: float
    airline: Optional[str] = None

    @property
    def source_id(self) -> int:
        return self.source.id

    @property
    def destination_id(self) -> int:
        return self.destination.id

    @property
    def is_self_loop(self) -> bool:
        return self.source.id == self.destination.id

    def to_hop(self) -> dict:
        """Compact representation used in itinerary responses."""
        return {
            "source": self.source.code,
            "destination": self.destination.code,
            "distance": self.distance,
        }


@dataclass(frozen=True)
class Itinerary:
    """
    Immutable representation of a complete search result.

    An ordered chain of routes from source to destination. The chain is
    empty when source and destination are the same airport.
    """

    source: Airport
    destination: Airport
    routes: tuple[Route, ...]

    def __post_init__(self) -> None:
        """Validate that the routes form a connected chain."""
        expected = self.source.id
        for route in self.routes:
            if route.source_id != expected:
                raise ValueError(
                    f"Route {route.source_id}->{route.destination_id} does not "
                    f"continue from airport {expected}"
                )
            expected = route.destination_id
        if expected != self.destination.id:
            raise ValueError(
                f"Itinerary ends at {expected}, expected {self.destination.id}"
            )

    @property
    def total_distance(self) -> float:
        """Sum of all route distances."""
        return sum(route.distance for route in self.routes)

    @property
    def num_hops(self) -> int:
        """Number of routes traversed."""
        return len(self.routes)

    @property
    def num_stops(self) -> int:
        """Intermediate airports (connections)."""
        return max(self.num_hops - 1, 0)

    @property
    def is_empty(self) -> bool:
        return not self.routes

    @property
    def route_airports(self) -> List[Airport]:
        """Ordered list of all airports visited, including both ends."""
        airports = [self.source]
        for route in self.routes:
            airports.append(route.destination)
        return airports

    @property
    def route_codes(self) -> List[Optional[str]]:
        """Display codes of route_airports."""
        return [airport.code for airport in self.route_airports]

    @classmethod
    def from_routes(
        cls,
        source: Airport,
        destination: Airport,
        routes: Sequence[Route],
    ) -> "Itinerary":
        """
        Factory method to create an Itinerary from a route sequence.

        Args:
            source: Requested origin airport.
            destination: Requested destination airport.
            routes: Routes in travel order (may be empty if source is
                destination).

        Returns:
            Validated Itinerary instance.
        """
        return cls(source=source, destination=destination, routes=tuple(routes))

    def to_dict(self) -> dict:
        """Response body used by the HTTP layer."""
        return {
            "source": self.source.code,
            "destination": self.destination.code,
            "distance": self.total_distance,
            "num_hops": self.num_hops,
            "hops": [route.to_hop() for route in self.routes],
        }
