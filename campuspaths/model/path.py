"""Immutable, cost-annotated route through a graph.

A `Path` is anchored at a start node and holds an ordered tuple of
`Segment` hops. Paths never change after construction: `Path.extend` returns
a new path with one more segment and the receiver stays as it was, so many
candidate paths in a search can share a prefix without aliasing issues.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from numbers import Real
from typing import Any, Dict, Generic, Iterator, Tuple, TypeVar

from campuspaths.utils.serialization import node_to_json

N = TypeVar("N")


@dataclass(frozen=True)
class Segment(Generic[N]):
    """One hop of a path.

    Attributes:
        start: Node the hop leaves from.
        end: Node the hop arrives at.
        cost: Non-negative cost of this hop alone.
    """

    start: N
    end: N
    cost: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "start": node_to_json(self.start),
            "end": node_to_json(self.end),
            "cost": self.cost,
        }


def _check_cost(edge_cost: Any) -> float:
    if isinstance(edge_cost, bool) or not isinstance(edge_cost, Real):
        raise ValueError(f"Segment cost must be a real number, got {edge_cost!r}.")
    value = float(edge_cost)
    if not math.isfinite(value) or value < 0:
        raise ValueError(f"Segment cost must be finite and non-negative, got {edge_cost!r}.")
    return value


@dataclass(frozen=True)
class Path(Generic[N]):
    """A sequence of segments starting at ``start`` with an accumulated cost.

    ``Path(node)`` is the zero-segment path at ``node`` with cost 0. Longer
    paths are built only through :meth:`extend`.

    Attributes:
        start: First node of the path.
        segments: Hops in traversal order.
        cost: Sum of all segment costs.
    """

    start: N
    segments: Tuple[Segment[N], ...] = field(init=False, default=())
    cost: float = field(init=False, default=0.0)

    @property
    def end(self) -> N:
        """Last node of the path; ``start`` for a zero-segment path."""
        if not self.segments:
            return self.start
        return self.segments[-1].end

    def extend(self, next_node: N, edge_cost: float) -> Path[N]:
        """Return a new path with a hop from ``end`` to ``next_node`` appended.

        Args:
            next_node: Node the new segment arrives at.
            edge_cost: Cost of the new segment.

        Returns:
            A new Path whose cost is this path's cost plus ``edge_cost``.

        Raises:
            ValueError: If ``edge_cost`` is negative, not finite, or not a real number.
        """
        hop_cost = _check_cost(edge_cost)
        extended: Path[N] = Path(self.start)
        object.__setattr__(
            extended,
            "segments",
            self.segments + (Segment(self.end, next_node, hop_cost),),
        )
        object.__setattr__(extended, "cost", self.cost + hop_cost)
        return extended

    def __iter__(self) -> Iterator[Segment[N]]:
        return iter(self.segments)

    def __len__(self) -> int:
        """Number of segments."""
        return len(self.segments)

    def __bool__(self) -> bool:
        # A zero-segment path is still a found path.
        return True

    def __lt__(self, other: Any) -> bool:
        """Order paths by cost."""
        if not isinstance(other, Path):
            return NotImplemented
        return self.cost < other.cost

    @property
    def nodes(self) -> Tuple[N, ...]:
        """Nodes visited from ``start`` to ``end`` inclusive."""
        return (self.start,) + tuple(segment.end for segment in self.segments)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-ready mapping of this path.

        Layout: ``{"start": node, "path": [segment, ...], "cost": float}``,
        with each segment as ``{"start", "end", "cost"}``.
        """
        return {
            "start": node_to_json(self.start),
            "path": [segment.to_dict() for segment in self.segments],
            "cost": self.cost,
        }
