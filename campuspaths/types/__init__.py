"""Shared typing constructs for campuspaths.

Type aliases used by the graph, path, and search modules. No runtime logic.
"""

from campuspaths.types.base import Cost, NodeID, Weights

__all__ = [
    "Cost",
    "NodeID",
    "Weights",
]
