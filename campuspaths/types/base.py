"""Base type aliases for graphs and paths."""

from __future__ import annotations

from typing import Hashable, List, Union

#: Numeric cost of an edge or path (e.g. distance in feet on the campus map).
Cost = Union[int, float]

#: Any hashable, equality-comparable value can serve as a graph node.
NodeID = Hashable

#: Parallel edge weights between one ordered pair of nodes, in insertion order.
Weights = List[float]
