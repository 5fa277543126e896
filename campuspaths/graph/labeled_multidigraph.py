"""Directed labeled multigraph used by the shortest-path search.

`LabeledMultiDiGraph` extends `networkx.MultiDiGraph` so that every edge
carries a finite numeric ``weight``, parallel edges and self-loops are kept,
and adding an edge registers its endpoints. ``children_of`` exposes the
per-successor weight lists the search reduces before expanding a node.
"""

from __future__ import annotations

import math
from numbers import Real
from typing import Any, Dict, Iterable, List, Optional

import networkx as nx

from campuspaths.types.base import NodeID, Weights


class UnknownNodeError(ValueError):
    """Raised when a query names a node that was never added to the graph."""

    def __init__(self, node: NodeID) -> None:
        super().__init__(f"Node '{node}' does not exist.")
        self.node = node


def _check_weight(weight: Any) -> float:
    if isinstance(weight, bool) or not isinstance(weight, Real):
        raise ValueError(f"Edge weight must be a real number, got {weight!r}.")
    value = float(weight)
    if not math.isfinite(value):
        raise ValueError(f"Edge weight must be finite, got {weight!r}.")
    return value


class LabeledMultiDiGraph(nx.MultiDiGraph):
    """A directed multigraph whose edges are labeled with numeric weights.

    This class enforces:
      - Every edge has a finite real ``weight`` attribute. Negative weights are
        stored as given; non-negativity is a precondition of the search, not
        of the graph.
      - ``add_node`` is idempotent.
      - ``add_edge`` registers missing endpoints, so ``contains_node`` is true
        for both endpoints afterwards.
      - Parallel edges between the same ordered pair are all retained and keep
        their insertion order.
      - Edge keys are integers from a counter that only advances.

    Inherits from:
        networkx.MultiDiGraph
    """

    def __init__(self, *args, **kwargs) -> None:
        self._next_edge_id: int = 0
        super().__init__(*args, **kwargs)

    def new_edge_key(self, u: NodeID, v: NodeID, key: Optional[int] = None) -> int:  # type: ignore[override]
        """Return a new unique integer edge key.

        Signature matches NetworkX's ``new_edge_key(self, u, v, key=None)``.
        """
        next_edge_id = self._next_edge_id
        self._next_edge_id += 1
        return next_edge_id

    #
    # Node management
    #
    def add_node(self, node_for_adding: NodeID, **attr: Any) -> None:
        """Register a node if absent; re-adding an existing node is a no-op.

        Attributes passed for an existing node are merged into its data.

        Raises:
            ValueError: If ``node_for_adding`` is None.
        """
        if node_for_adding is None:
            raise ValueError("None cannot be a node.")
        super().add_node(node_for_adding, **attr)

    def contains_node(self, node: NodeID) -> bool:
        """Return True if ``node`` has been registered."""
        return node in self

    #
    # Edge management
    #
    def add_edge(  # pyright: ignore[reportIncompatibleMethodOverride]
        self,
        u_for_edge: NodeID,
        v_for_edge: NodeID,
        weight: Any,
        key: Optional[int] = None,
        **attr: Any,
    ) -> int:
        """Append a directed edge ``u_for_edge -> v_for_edge`` labeled ``weight``.

        Both endpoints are added if missing. Existing edges between the same
        pair are kept; the new edge is listed after them.

        Args:
            u_for_edge: Source node.
            v_for_edge: Destination node.
            weight: Finite real edge weight.
            key: Optional explicit integer key. When omitted a fresh key is
                generated. Explicit keys advance the internal counter so that
                generated keys never collide with them.
            **attr: Additional edge attributes.

        Returns:
            int: The key of the new edge.

        Raises:
            ValueError: If an endpoint is None, the weight is not a finite real
                number, or the key is already used between the two nodes.
        """
        if u_for_edge is None or v_for_edge is None:
            raise ValueError("None cannot be a node.")
        value = _check_weight(weight)

        if key is None:
            key = self.new_edge_key(u_for_edge, v_for_edge)
        else:
            if self.has_edge(u_for_edge, v_for_edge, key):
                raise ValueError(
                    f"Edge with key '{key}' already exists from {u_for_edge} to {v_for_edge}."
                )
            if isinstance(key, int) and key >= self._next_edge_id:
                self._next_edge_id = key + 1

        super().add_edge(u_for_edge, v_for_edge, key=key, weight=value, **attr)
        return key

    def add_edges_from(self, ebunch_to_add: Iterable[Any], **attr: Any) -> List[int]:  # type: ignore[override]
        """Add edges given as ``(u, v, weight)``, ``(u, v, data)`` or ``(u, v, key, data)``.

        Tuples whose trailing element is a dict carry the weight under
        ``"weight"``. This routes NetworkX helpers such as ``copy()`` and
        ``reverse()`` through :meth:`add_edge` validation.

        Returns:
            List[int]: The keys of the added edges.
        """
        keys: List[int] = []
        for edge in ebunch_to_add:
            u, v, *rest = edge
            data: Dict[str, Any] = dict(attr)
            key: Optional[int] = None
            if len(rest) == 1 and not isinstance(rest[0], dict):
                data["weight"] = rest[0]
            elif len(rest) == 1:
                data.update(rest[0])
            elif len(rest) == 2:
                key = rest[0]
                data.update(rest[1])
            elif rest:
                raise ValueError(f"Edge tuple {edge!r} must have 3 or 4 elements.")
            if "weight" not in data:
                raise ValueError(f"Edge {u!r} -> {v!r} has no weight.")
            weight = data.pop("weight")
            keys.append(self.add_edge(u, v, weight, key=key, **data))
        return keys

    #
    # Queries
    #
    def children_of(self, node: NodeID) -> Dict[NodeID, Weights]:
        """Map each direct successor of ``node`` to all edge weights towards it.

        Weights are listed in insertion order and are not reduced; a caller
        wanting the cheapest hop takes ``min`` itself.

        Raises:
            UnknownNodeError: If ``node`` was never registered.
        """
        if node not in self._succ:
            raise UnknownNodeError(node)
        return {
            child: [edge_attr["weight"] for edge_attr in keydict.values()]
            for child, keydict in self._succ[node].items()
        }

    def edge_count(self) -> int:
        """Return the total number of edges, counting parallel edges."""
        return self.number_of_edges()

    def to_dict(self) -> Dict[str, Any]:
        """Return a node-link representation suitable for JSON serialization."""
        # Import here to avoid circular import
        from campuspaths.graph.io import graph_to_node_link

        return graph_to_node_link(self)
