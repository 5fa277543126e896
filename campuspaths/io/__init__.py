"""Readers for on-disk map data."""

from campuspaths.io.parser import (
    CampusBuilding,
    CampusPath,
    MapDataError,
    parse_campus_buildings,
    parse_campus_paths,
)

__all__ = [
    "CampusBuilding",
    "CampusPath",
    "MapDataError",
    "parse_campus_buildings",
    "parse_campus_paths",
]
