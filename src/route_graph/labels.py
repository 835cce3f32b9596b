from dataclasses import dataclass
from typing import Dict, Hashable, Tuple

from .graph import RouteEdge

# (airport_id, hops_used)
State = Tuple[Hashable, int]

# state -> (predecessor state, route taken from predecessor)
ParentTable = Dict[State, Tuple[State, RouteEdge]]


@dataclass(frozen=True, slots=True)
class Label:
    """
    Represents a state in the bounded-hop search space.

    Each Label tracks:
    - Current position (airport id)
    - Number of routes traversed to get here
    - Total distance accumulated

    Labels do not link to their predecessor. Paths are rebuilt from
    the per-search ParentTable keyed by state.
    """

    airport_id: Hashable
    hops: int
    distance: float

    @property
    def state(self) -> State:
        """Product-space key (airport, hops_used)."""
        return (self.airport_id, self.hops)

    def __lt__(self, other: "Label") -> bool:
        """
        Comparison for heapq tiebreaking.

        The heap is keyed on (distance, hops, label). When both keys are
        equal, fall back to the airport id so that pop order does not
        depend on insertion order.
        """
        return str(self.airport_id) < str(other.airport_id)
