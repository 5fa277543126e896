"""campuspaths: shortest walking routes between campus buildings.

The core is a weighted directed multigraph and a path-based Dijkstra search
over it. Around it sit a CSV-backed campus map, an HTTP API, a command
script driver, and a CLI.

Primary API:
    LabeledMultiDiGraph - Directed multigraph with weighted edges
    find_path() - Least-cost Path between two nodes, or None
    Path, Segment - Immutable route and its hops
    CampusMap - Buildings, walkways, and routes by building short name

Example:
    from campuspaths import LabeledMultiDiGraph, find_path

    g = LabeledMultiDiGraph()
    g.add_edge("A", "B", 5.0)
    g.add_edge("A", "B", 2.0)
    g.add_edge("B", "C", 1.0)

    path = find_path(g, "A", "C")
    assert path is not None and path.cost == 3.0
"""

from __future__ import annotations

from campuspaths import logging
from campuspaths._version import __version__
from campuspaths.algorithms.dijkstra import find_path
from campuspaths.campus_map import CampusMap
from campuspaths.config import CampusPathsConfig, load_config
from campuspaths.graph.labeled_multidigraph import LabeledMultiDiGraph, UnknownNodeError
from campuspaths.io.parser import MapDataError
from campuspaths.model.path import Path, Segment
from campuspaths.model.point import Point
from campuspaths.script_driver import CommandError, ScriptDriver

__all__ = [
    # Version
    "__version__",
    # Core
    "LabeledMultiDiGraph",
    "UnknownNodeError",
    "Path",
    "Segment",
    "find_path",
    # Campus map
    "Point",
    "CampusMap",
    "MapDataError",
    # Config
    "CampusPathsConfig",
    "load_config",
    # Script protocol
    "ScriptDriver",
    "CommandError",
    # Utilities
    "logging",
]
