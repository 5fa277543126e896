"""Least-cost path search over a `LabeledMultiDiGraph`.

The search keeps whole candidate paths in its priority queue rather than
per-node distance labels, so no decrease-key step is needed. Stale
candidates that reach an already settled node are simply dropped when popped.
"""

from __future__ import annotations

from heapq import heappop, heappush
from itertools import count
from typing import List, Optional, Set, Tuple

from campuspaths.graph.labeled_multidigraph import LabeledMultiDiGraph
from campuspaths.logging import get_logger
from campuspaths.model.path import Path
from campuspaths.types.base import Cost, NodeID

logger = get_logger(__name__)


def find_path(
    graph: LabeledMultiDiGraph,
    start: NodeID,
    end: NodeID,
) -> Optional[Path[NodeID]]:
    """Return a minimum-cost path from ``start`` to ``end``, or None.

    Candidates are expanded in non-decreasing cost order. When several
    parallel edges connect a node to a child, only the cheapest one is used.
    Candidates with equal cost are expanded in the order they were queued,
    which follows the graph's edge insertion order; the result is therefore
    deterministic for a given graph, but which of several equal-cost optimal
    paths is returned is not otherwise specified.

    Args:
        graph: Graph to search. Must not be modified while the search runs.
        start: Origin node. Must be in ``graph``.
        end: Destination node. Must be in ``graph``.

    Returns:
        The least-cost Path, the zero-segment path if ``start == end``, or
        None if ``end`` is unreachable.

    Raises:
        UnknownNodeError: If ``start`` is not in ``graph`` and differs from
            ``end``. Callers validate both endpoints before searching.

    Note:
        All edge weights must be non-negative. With negative weights the
        result is not guaranteed to be optimal, and a negative weight on an
        expanded edge makes `Path.extend` raise ValueError.
    """
    tie_breaker = count()
    min_pq: List[Tuple[Cost, int, Path[NodeID]]] = [(0.0, next(tie_breaker), Path(start))]
    settled: Set[NodeID] = set()
    pushed = 1

    while min_pq:
        _, _, candidate = heappop(min_pq)
        node_id = candidate.end

        if node_id == end:
            logger.debug(
                "Found path %s -> %s: cost=%s, segments=%d, candidates=%d",
                start,
                end,
                candidate.cost,
                len(candidate),
                pushed,
            )
            return candidate

        if node_id in settled:
            continue
        settled.add(node_id)

        for child, weights in graph.children_of(node_id).items():
            if child in settled:
                continue
            extended = candidate.extend(child, min(weights))
            heappush(min_pq, (extended.cost, next(tie_breaker), extended))
            pushed += 1

    logger.debug(
        "No path %s -> %s: settled=%d, candidates=%d",
        start,
        end,
        len(settled),
        pushed,
    )
    return None
