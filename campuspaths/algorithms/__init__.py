"""Search algorithms over `LabeledMultiDiGraph`."""

from campuspaths.algorithms.dijkstra import find_path

__all__ = ["find_path"]
