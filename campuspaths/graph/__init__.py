"""Graph primitives.

This package provides the weighted multigraph `LabeledMultiDiGraph` and
node-link serialization helpers (`io`).
"""

from campuspaths.graph.labeled_multidigraph import LabeledMultiDiGraph, UnknownNodeError

__all__ = ["LabeledMultiDiGraph", "UnknownNodeError"]
