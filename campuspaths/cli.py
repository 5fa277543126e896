"""Command-line interface for campuspaths."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from campuspaths.campus_map import CampusMap
from campuspaths.config import CampusPathsConfig, load_config
from campuspaths.logging import get_logger, set_global_log_level
from campuspaths.script_driver import ScriptDriver

logger = get_logger(__name__)


def _format_route(campus_map: CampusMap, start: str, end: str) -> List[str]:
    """Return the printable lines for a route between two buildings.

    Raises:
        ValueError: If a building name is unknown.
    """
    path = campus_map.find_shortest_path(start, end)
    lines = [
        f"path from {campus_map.long_name_for_short(start)} "
        f"to {campus_map.long_name_for_short(end)}:"
    ]
    if path is None:
        lines.append("no path found")
        return lines
    for segment in path:
        lines.append(f"{segment.start} to {segment.end} with weight {segment.cost:.3f}")
    lines.append(f"total cost: {path.cost:.3f}")
    return lines


def _run_scripts(files: List[str]) -> None:
    """Run each script file through a fresh `ScriptDriver`, writing to stdout."""
    for name in files:
        if name == "-":
            ScriptDriver(sys.stdin, sys.stdout).run_tests()
            continue
        logger.debug("Running script %s", name)
        with open(name, "r", encoding="utf-8") as fh:
            ScriptDriver(fh, sys.stdout).run_tests()


def _print_buildings(campus_map: CampusMap) -> None:
    for short_name, long_name in sorted(campus_map.building_names().items()):
        print(f"{short_name}\t{long_name}")


def _serve(config: CampusPathsConfig, host: Optional[str], port: Optional[int]) -> None:
    # Imported lazily so script/route commands do not pull in Flask
    from campuspaths.server import create_app

    app = create_app(config=config)
    bind_host = host if host is not None else config.host
    bind_port = port if port is not None else config.port
    logger.info("Serving campus paths on http://%s:%d", bind_host, bind_port)
    app.run(host=bind_host, port=bind_port)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``campuspaths`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="campuspaths",
        description="Find shortest walking routes between campus buildings.",
    )

    # Global options
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )
    parser.add_argument(
        "--config", "-c", type=Path, default=None, help="Path to a YAML config file"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{script,route,buildings,serve}",
        help="Available commands",
    )

    script_parser = subparsers.add_parser(
        "script", help="Run graph command scripts ('-' reads stdin)"
    )
    script_parser.add_argument("files", nargs="+", help="Script files to run")

    route_parser = subparsers.add_parser(
        "route", help="Print the shortest route between two buildings"
    )
    route_parser.add_argument("start", help="Short name of the start building")
    route_parser.add_argument("end", help="Short name of the end building")

    subparsers.add_parser("buildings", help="List known buildings")

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP server")
    serve_parser.add_argument("--host", default=None, help="Bind address")
    serve_parser.add_argument("--port", "-p", type=int, default=None, help="Bind port")

    effective_args = sys.argv[1:] if argv is None else argv

    # If no arguments are provided, show help and exit cleanly
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    try:
        config = load_config(args.config) if args.config else CampusPathsConfig()
    except (OSError, ValueError) as exc:
        logger.error("Failed to load config %s: %s", args.config, exc)
        sys.exit(1)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        try:
            set_global_log_level(config.log_level)
        except ValueError as exc:
            logger.error("%s", exc)
            sys.exit(1)

    try:
        if args.command == "script":
            _run_scripts(args.files)
        elif args.command == "route":
            campus_map = CampusMap.from_config(config)
            for line in _format_route(campus_map, args.start, args.end):
                print(line)
        elif args.command == "buildings":
            _print_buildings(CampusMap.from_config(config))
        elif args.command == "serve":
            _serve(config, args.host, args.port)
    except (OSError, ValueError) as exc:
        logger.error("%s", exc)
        sys.exit(1)


if __name__ == "__main__":
    main()
