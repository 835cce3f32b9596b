from typing import List

from .graph import RouteEdge
from .labels import Label, ParentTable


def reconstruct_path(label: Label, parents: ParentTable) -> List[RouteEdge]:
    """
    Reconstruct the ordered list of routes leading to a terminal label.

    Walks the back-pointer table from the terminal state until reaching
    a state with no predecessor (the start state).

    Returns:
        routes: ordered list of routes taken, empty for the start label
    """
    routes: List[RouteEdge] = []

    state = label.state
    while state in parents:
        state, route = parents[state]
        routes.append(route)

    routes.reverse()

    return routes


def describe_path(routes: List[RouteEdge]) -> str:
    """
    Render a path as 'A -> B -> C (123.4 km)' for log messages.
    """
    if not routes:
        return "(empty itinerary)"

    stops = [str(routes[0].source_id)] + [str(r.destination_id) for r in routes]
    total = sum(r.distance for r in routes)
    return f"{' -> '.join(stops)} ({total:.1f} km)"
