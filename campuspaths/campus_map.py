"""Campus map: buildings, walkways, and routes between buildings.

`CampusMap` builds a `LabeledMultiDiGraph` of `Point` nodes from the two map
CSV files, keeps the building short name -> entrance point and short name ->
long name tables, and answers route queries by short name.
"""

from __future__ import annotations

from pathlib import Path as FilePath
from typing import Dict, Iterable, Optional, Union

from campuspaths.algorithms.dijkstra import find_path
from campuspaths.config import CampusPathsConfig
from campuspaths.graph.labeled_multidigraph import LabeledMultiDiGraph
from campuspaths.io.parser import (
    CampusBuilding,
    CampusPath,
    parse_campus_buildings,
    parse_campus_paths,
)
from campuspaths.logging import get_logger
from campuspaths.model.path import Path
from campuspaths.model.point import Point

logger = get_logger(__name__)


class CampusMap:
    """Buildings on campus and the walkways connecting them.

    The walkway graph is built once in the constructor and is never modified
    afterwards, so route queries may run concurrently.

    Attributes:
        graph: Walkway graph; nodes are `Point`, weights are distances.
    """

    def __init__(
        self,
        walkways: Iterable[CampusPath],
        buildings: Iterable[CampusBuilding],
    ) -> None:
        self.graph: LabeledMultiDiGraph = LabeledMultiDiGraph()
        self._short_to_point: Dict[str, Point] = {}
        self._short_to_long: Dict[str, str] = {}

        for walkway in walkways:
            self.graph.add_edge(
                Point(walkway.x1, walkway.y1),
                Point(walkway.x2, walkway.y2),
                walkway.distance,
            )
        for building in buildings:
            location = Point(building.x, building.y)
            # A building whose entrance has no walkway is still a valid endpoint
            self.graph.add_node(location)
            self._short_to_point[building.short_name] = location
            self._short_to_long[building.short_name] = building.long_name

        logger.info(
            "Campus map built: %d buildings, %d points, %d walkways",
            len(self._short_to_point),
            self.graph.number_of_nodes(),
            self.graph.edge_count(),
        )

    @classmethod
    def from_files(
        cls,
        paths_file: Union[str, FilePath],
        buildings_file: Union[str, FilePath],
    ) -> CampusMap:
        """Build a map from ``campus_paths.csv`` and ``campus_buildings.csv`` files.

        Raises:
            OSError: If a file cannot be read.
            MapDataError: If a file is malformed.
        """
        logger.debug("Loading campus map from %s and %s", paths_file, buildings_file)
        return cls(parse_campus_paths(paths_file), parse_campus_buildings(buildings_file))

    @classmethod
    def from_config(cls, config: Optional[CampusPathsConfig] = None) -> CampusMap:
        """Build a map from the data files named in ``config`` (bundled data by default)."""
        config = config or CampusPathsConfig()
        return cls.from_files(config.paths_file, config.buildings_file)

    def short_name_exists(self, short_name: str) -> bool:
        return short_name in self._short_to_point

    def long_name_for_short(self, short_name: str) -> str:
        """Return the full name of a building.

        Raises:
            ValueError: If ``short_name`` is not a known building.
        """
        if short_name not in self._short_to_long:
            raise ValueError(f"Unknown building '{short_name}'")
        return self._short_to_long[short_name]

    def building_names(self) -> Dict[str, str]:
        """Return a copy of the short name -> long name table."""
        return dict(self._short_to_long)

    def location_of(self, short_name: str) -> Point:
        """Return the entrance point of a building.

        Raises:
            ValueError: If ``short_name`` is not a known building.
        """
        if short_name not in self._short_to_point:
            raise ValueError(f"Unknown building '{short_name}'")
        return self._short_to_point[short_name]

    def find_shortest_path(
        self, start_short_name: str, end_short_name: str
    ) -> Optional[Path[Point]]:
        """Return the shortest walking route between two buildings.

        Args:
            start_short_name: Short name of the departure building.
            end_short_name: Short name of the arrival building.

        Returns:
            The least-cost Path between the two entrances, or None when no
            walkway route connects them.

        Raises:
            ValueError: If a name is None or not a known building.
        """
        if start_short_name is None or end_short_name is None:
            raise ValueError("Building short name is required")
        start = self.location_of(start_short_name)
        end = self.location_of(end_short_name)

        path = find_path(self.graph, start, end)
        if path is None:
            logger.info("No route from %s to %s", start_short_name, end_short_name)
        else:
            logger.debug(
                "Route %s -> %s: %d segments, cost %.3f",
                start_short_name,
                end_short_name,
                len(path),
                path.cost,
            )
        return path
