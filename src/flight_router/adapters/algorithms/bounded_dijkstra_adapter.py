"""
Bounded Dijkstra Adapter - Bridge between architecture and algorithm.

Runs the route_graph search against a CachedRouteGraph snapshot and
converts the reconstructed path into an Itinerary schema object.
"""

import logging

from src.route_graph.alg import bounded_dijkstra
from src.route_graph.reconstruction import describe_path, reconstruct_path

from src.flight_router.adapters.repositories.route_graph_repo import CachedRouteGraph
from src.flight_router.ports.route_finder import RouteFinder
from src.flight_router.schemas.route import Itinerary

logger = logging.getLogger(__name__)


class BoundedDijkstraRouteFinder(RouteFinder):
    """
    Adapter for the bounded-hop Dijkstra search.

    The search only reads the graph (outbound_routes, has_airport), so
    one snapshot can serve any number of concurrent calls. Each call
    owns its frontier, distance table and back-pointer table.
    """

    @property
    def name(self) -> str:
        """Algorithm identifier."""
        return "Bounded-Hop Dijkstra"

    def find_itinerary(
        self,
        graph: CachedRouteGraph,
        source_id: int,
        destination_id: int,
        max_hops: int,
    ) -> Itinerary:
        """
        Find the shortest itinerary using at most max_hops routes.

        Args:
            graph: Immutable graph snapshot.
            source_id: Resolved origin airport id.
            destination_id: Resolved destination airport id.
            max_hops: Maximum number of routes traversed.

        Returns:
            Itinerary with routes in travel order.

        Raises:
            InvalidMaxHopsError: If max_hops is not a positive integer.
            UnknownAirportError: If an id is not in the graph.
            NoRouteFoundError: If no itinerary exists within max_hops.
        """
        label, parents = bounded_dijkstra(
            graph,
            source_id=source_id,
            destination_id=destination_id,
            max_hops=max_hops,
        )
        routes = reconstruct_path(label, parents)

        logger.debug(
            "Bounded Dijkstra settled %s -> %s in %d hop(s): %s",
            source_id,
            destination_id,
            label.hops,
            describe_path(routes),
        )

        return Itinerary.from_routes(
            source=graph.get_airport(source_id),
            destination=graph.get_airport(destination_id),
            routes=routes,
        )
