"""
Bounded-hop Dijkstra for finding the shortest itinerary.

The search runs over the product state space (airport x hops_used)
instead of airports alone, so the hop bound is respected while the
globally shortest itinerary within that bound is still found.

Frontier ordering is (distance, hops): among itineraries of equal
length the one with fewer routes is extracted first.
"""

import heapq
from typing import Dict, Hashable, List, Tuple

from .exceptions import NoRouteFoundError
from .graph import RouteEdge, RouteGraph
from .labels import Label, ParentTable, State
from .reconstruction import reconstruct_path
from .validation import validate_search_inputs

# At most this many routes per itinerary unless the caller says otherwise
DEFAULT_MAX_HOPS = 3


def bounded_dijkstra(
    graph: RouteGraph,
    source_id: Hashable,
    destination_id: Hashable,
    max_hops: int = DEFAULT_MAX_HOPS,
) -> Tuple[Label, ParentTable]:
    """
    Shortest path from source to destination using at most max_hops routes.

    Args:
        graph: Immutable graph exposing has_airport() and outbound_routes().
        source_id: Origin airport id.
        destination_id: Target airport id.
        max_hops: Maximum number of routes traversed (>= 1).

    Returns:
        Terminal Label at the destination and the back-pointer table
        needed to reconstruct its path.

    Raises:
        InvalidMaxHopsError: If max_hops is not a positive integer.
        UnknownAirportError: If source or destination is not in the graph.
        NoRouteFoundError: If the destination is unreachable within max_hops.
    """
    validate_search_inputs(graph, source_id, destination_id, max_hops)

    start_label = Label(airport_id=source_id, hops=0, distance=0.0)
    parents: ParentTable = {}

    if source_id == destination_id:
        return start_label, parents

    best: Dict[State, float] = {start_label.state: 0.0}
    # airport -> fewest hops it was settled at
    settled_hops: Dict[Hashable, int] = {}
    pq: List[Tuple[float, int, Label]] = [(0.0, 0, start_label)]

    while pq:
        curr_distance, curr_hops, label = heapq.heappop(pq)
        airport = label.airport_id

        # Already settled with no more hops and no more distance: dominated
        if settled_hops.get(airport, curr_hops + 1) <= curr_hops:
            continue
        settled_hops[airport] = curr_hops

        if airport == destination_id:
            return label, parents

        if curr_hops >= max_hops:
            continue

        next_hops = curr_hops + 1
        for route in graph.outbound_routes(airport):
            next_airport = route.destination_id
            if settled_hops.get(next_airport, next_hops + 1) <= next_hops:
                continue

            next_state = (next_airport, next_hops)
            new_distance = curr_distance + route.distance
            if new_distance < best.get(next_state, float("inf")):
                best[next_state] = new_distance
                parents[next_state] = (label.state, route)
                heapq.heappush(
                    pq,
                    (
                        new_distance,
                        next_hops,
                        Label(
                            airport_id=next_airport,
                            hops=next_hops,
                            distance=new_distance,
                        ),
                    ),
                )

    raise NoRouteFoundError(source_id, destination_id, max_hops)


def find_shortest_path(
    graph: RouteGraph,
    source_id: Hashable,
    destination_id: Hashable,
    max_hops: int = DEFAULT_MAX_HOPS,
) -> Tuple[List[RouteEdge], float]:
    """
    Run bounded_dijkstra and return the reconstructed routes.

    Returns:
        (routes, total_distance). routes is empty when source equals
        destination.
    """
    label, parents = bounded_dijkstra(graph, source_id, destination_id, max_hops)
    return reconstruct_path(label, parents), label.distance
