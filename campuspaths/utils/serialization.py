"""Helpers for turning graph values into JSON-ready data."""

from __future__ import annotations

from typing import Any


def node_to_json(node: Any) -> Any:
    """Return a JSON-ready form of ``node``.

    Nodes exposing ``to_dict()`` (such as `Point`) are converted through it;
    anything else is returned unchanged.
    """
    to_dict = getattr(node, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    return node
