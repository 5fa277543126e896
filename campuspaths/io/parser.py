"""CSV readers for the campus map.

Two files describe the map:

``campus_paths.csv``
    ``x1,y1,x2,y2,distance``: one directed walkway per row. Two-way
    walkways are listed once per direction.

``campus_buildings.csv``
    ``shortName,longName,x,y``: a building and the map point of its
    entrance.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence, Union

import numpy as np
import pandas as pd

from campuspaths.logging import get_logger

logger = get_logger(__name__)

PATH_COLUMNS = ("x1", "y1", "x2", "y2", "distance")
BUILDING_COLUMNS = ("shortName", "longName", "x", "y")


class MapDataError(ValueError):
    """Raised when a map CSV file is missing columns or holds bad values."""


@dataclass(frozen=True)
class CampusPath:
    """One directed walkway between two map points."""

    x1: float
    y1: float
    x2: float
    y2: float
    distance: float


@dataclass(frozen=True)
class CampusBuilding:
    """A named building and the coordinates of its entrance."""

    short_name: str
    long_name: str
    x: float
    y: float


def _read_frame(
    path: Union[str, Path],
    columns: Sequence[str],
    numeric: Sequence[str],
) -> pd.DataFrame:
    """Read ``path`` and check required columns and numeric values.

    Raises:
        OSError: If the file cannot be opened.
        MapDataError: If columns are missing or a numeric cell is blank, does not
            parse, or is not finite.
    """
    try:
        frame = pd.read_csv(
            path, dtype=str, keep_default_na=False, skipinitialspace=True
        )
    except pd.errors.EmptyDataError as exc:
        raise MapDataError(f"{path}: file is empty") from exc
    except pd.errors.ParserError as exc:
        raise MapDataError(f"{path}: {exc}") from exc

    missing = [col for col in columns if col not in frame.columns]
    if missing:
        raise MapDataError(f"{path}: missing column(s) {', '.join(missing)}")

    for col in numeric:
        try:
            converted = pd.to_numeric(frame[col].str.strip(), errors="raise")
        except (ValueError, TypeError) as exc:
            raise MapDataError(f"{path}: column '{col}' has a non-numeric value: {exc}") from exc
        # Blank cells and "nan" parse as NaN without raising
        values = converted.to_numpy(dtype=float, na_value=np.nan)
        if not np.isfinite(values).all():
            raise MapDataError(f"{path}: column '{col}' has a missing or non-finite value")
        frame[col] = values
    return frame


def parse_campus_paths(path: Union[str, Path]) -> List[CampusPath]:
    """Return every walkway listed in a ``campus_paths.csv`` file."""
    frame = _read_frame(path, PATH_COLUMNS, PATH_COLUMNS)
    walkways = [
        CampusPath(
            x1=float(row.x1),
            y1=float(row.y1),
            x2=float(row.x2),
            y2=float(row.y2),
            distance=float(row.distance),
        )
        for row in frame.itertuples(index=False)
    ]
    logger.debug("Parsed %d walkways from %s", len(walkways), path)
    return walkways


def parse_campus_buildings(path: Union[str, Path]) -> List[CampusBuilding]:
    """Return every building listed in a ``campus_buildings.csv`` file.

    Raises:
        MapDataError: If a short name is blank or appears twice.
    """
    frame = _read_frame(path, BUILDING_COLUMNS, ("x", "y"))

    buildings: List[CampusBuilding] = []
    seen = set()
    for row in frame.itertuples(index=False):
        short_name = row.shortName.strip()
        if not short_name:
            raise MapDataError(f"{path}: building with blank shortName")
        if short_name in seen:
            raise MapDataError(f"{path}: duplicate shortName '{short_name}'")
        seen.add(short_name)
        buildings.append(
            CampusBuilding(
                short_name=short_name,
                long_name=row.longName.strip(),
                x=float(row.x),
                y=float(row.y),
            )
        )
    logger.debug("Parsed %d buildings from %s", len(buildings), path)
    return buildings
