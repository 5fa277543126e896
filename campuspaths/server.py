"""HTTP endpoints for the campus route finder.

Routes:
    GET /find-path?start=<short>&end=<short>
        The shortest route as ``Path.to_dict()`` JSON, or ``null`` when the
        buildings are not connected.
    GET /get-valid-buildings
        JSON object mapping building short names to long names.

Responses carry ``Access-Control-Allow-Origin: *`` so the browser client,
served from a different origin, can call the API.
"""

from __future__ import annotations

from typing import Optional

from flask import Blueprint, Flask, Response, current_app, jsonify, request

from campuspaths.campus_map import CampusMap
from campuspaths.config import CampusPathsConfig
from campuspaths.logging import get_logger

logger = get_logger(__name__)

api_bp = Blueprint("campuspaths", __name__)


def _campus_map() -> CampusMap:
    return current_app.config["CAMPUS_MAP"]


@api_bp.route("/find-path")
def find_path_route():
    start = request.args.get("start")
    end = request.args.get("end")
    if not start or not end:
        return jsonify({"error": "Missing 'start' or 'end' parameter"}), 400

    campus_map = _campus_map()
    try:
        path = campus_map.find_shortest_path(start, end)
    except ValueError as exc:
        logger.info("Rejected route request %s -> %s: %s", start, end, exc)
        return jsonify({"error": str(exc)}), 400

    return jsonify(path.to_dict() if path is not None else None)


@api_bp.route("/get-valid-buildings")
def valid_buildings_route():
    return jsonify(_campus_map().building_names())


def _allow_cors(response: Response) -> Response:
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Methods"] = "GET, OPTIONS"
    response.headers["Access-Control-Allow-Headers"] = "Content-Type"
    return response


def create_app(
    campus_map: Optional[CampusMap] = None,
    config: Optional[CampusPathsConfig] = None,
) -> Flask:
    """Create the Flask application.

    Args:
        campus_map: Map to serve. Built from ``config`` when omitted.
        config: Data file locations; bundled data by default.

    Returns:
        A configured Flask app.
    """
    if campus_map is None:
        campus_map = CampusMap.from_config(config)

    app = Flask(__name__)
    app.config["CAMPUS_MAP"] = campus_map
    # Building names are returned in file order, not sorted
    app.json.sort_keys = False
    app.register_blueprint(api_bp)
    app.after_request(_allow_cors)
    return app
