"""
Search constraints for shortest-itinerary queries.

Defines the validated parameters passed to the routing algorithm.
"""

from dataclasses import dataclass
from typing import Optional

from src.route_graph.alg import DEFAULT_MAX_HOPS
from src.route_graph.validation import validate_max_hops


@dataclass(frozen=True)
class SearchConstraints:
    """
    Immutable search constraints.

    Frozen to prevent accidental mutation during concurrent access.

    Attributes:
        source_id: Resolved origin airport id.
        destination_id: Resolved destination airport id.
        max_hops: Maximum number of routes in the itinerary.
    """

    source_id: int
    destination_id: int
    max_hops: int = DEFAULT_MAX_HOPS

    def __post_init__(self) -> None:
        """Validate constraints after initialization."""
        validate_max_hops(self.max_hops)

    @classmethod
    def create(
        cls,
        source_id: int,
        destination_id: int,
        max_hops: Optional[int] = None,
    ) -> "SearchConstraints":
        """
        Factory method that applies the default hop bound.

        Args:
            source_id: Origin airport id.
            destination_id: Destination airport id.
            max_hops: Hop bound, or None for DEFAULT_MAX_HOPS.

        Returns:
            Validated SearchConstraints instance.
        """
        return cls(
            source_id=source_id,
            destination_id=destination_id,
            max_hops=DEFAULT_MAX_HOPS if max_hops is None else max_hops,
        )

    @property
    def is_degenerate(self) -> bool:
        """True when origin and destination are the same airport."""
        return self.source_id == self.destination_id
