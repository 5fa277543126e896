"""Coordinate node type for the campus map."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping


@dataclass(frozen=True, order=True)
class Point:
    """A location on the campus map, in map pixel coordinates.

    Points are hashable and ordered (by ``x`` then ``y``) so they can serve
    as graph nodes and be sorted for stable output.
    """

    x: float
    y: float

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Point:
        return cls(float(data["x"]), float(data["y"]))

    def __str__(self) -> str:
        return f"({self.x:.3f}, {self.y:.3f})"
