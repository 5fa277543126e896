"""Configuration for campuspaths components.

`CampusPathsConfig` holds the map data locations, the HTTP bind address and
the log level. Defaults point at the CSV files bundled in
``campuspaths/data``. `load_config` reads overrides from a YAML file.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Union

import yaml

PATHS_FILE_NAME = "campus_paths.csv"
BUILDINGS_FILE_NAME = "campus_buildings.csv"


def bundled_data_file(name: str) -> Path:
    """Return the filesystem path of a CSV file shipped with the package."""
    return Path(str(resources.files("campuspaths.data").joinpath(name)))


@dataclass
class CampusPathsConfig:
    """Settings for loading the campus map and serving it over HTTP."""

    # Map data
    paths_file: Path = field(default_factory=lambda: bundled_data_file(PATHS_FILE_NAME))
    buildings_file: Path = field(
        default_factory=lambda: bundled_data_file(BUILDINGS_FILE_NAME)
    )

    # HTTP server; 4567 is the port the browser client expects
    host: str = "127.0.0.1"
    port: int = 4567

    log_level: str = "INFO"


def load_config(path: Union[str, Path]) -> CampusPathsConfig:
    """Load a `CampusPathsConfig` from a YAML file.

    Keys not present in the file keep their defaults. Relative data file
    paths are resolved against the directory containing the YAML file.

    Example::

        paths_file: data/campus_paths.csv
        buildings_file: data/campus_buildings.csv
        port: 8080
        log_level: debug

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the document is not a mapping, has unknown keys, or
            has a non-integer port.
    """
    config_path = Path(path)
    data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"{config_path}: configuration must be a mapping at top-level.")

    # YAML 1.1 turns keys like "on"/"yes" into booleans; keep everything as strings
    data = {str(key): value for key, value in data.items()}

    allowed = {f.name for f in fields(CampusPathsConfig)}
    unknown = sorted(set(data) - allowed)
    if unknown:
        raise ValueError(
            f"{config_path}: unrecognized configuration keys: {', '.join(unknown)}"
        )

    overrides: Dict[str, Any] = {}
    for key in ("paths_file", "buildings_file"):
        if key in data:
            file_path = Path(str(data[key])).expanduser()
            if not file_path.is_absolute():
                file_path = config_path.parent / file_path
            overrides[key] = file_path
    if "host" in data:
        overrides["host"] = str(data["host"])
    if "port" in data:
        port = data["port"]
        if isinstance(port, bool) or not isinstance(port, int):
            raise ValueError(f"{config_path}: 'port' must be an integer, got {port!r}")
        overrides["port"] = port
    if "log_level" in data:
        overrides["log_level"] = str(data["log_level"])

    return replace(CampusPathsConfig(), **overrides)


# Global configuration instance
DEFAULT_CONFIG = CampusPathsConfig()
