"""Value types: paths and map coordinates."""

from campuspaths.model.path import Path, Segment
from campuspaths.model.point import Point

__all__ = ["Path", "Segment", "Point"]
