"""Node-link serialization for `LabeledMultiDiGraph`."""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional

from campuspaths.graph.labeled_multidigraph import LabeledMultiDiGraph
from campuspaths.types.base import NodeID
from campuspaths.utils.serialization import node_to_json


def graph_to_node_link(graph: LabeledMultiDiGraph) -> Dict[str, Any]:
    """
    Convert a LabeledMultiDiGraph into a node-link dict.

    The returned dict has the following structure:
        {
            "nodes": [{"id": <node>}, ...],
            "links": [
                {"source": <index>, "target": <index>, "key": <edge_key>, "weight": <float>},
                ...
            ]
        }

    Link endpoints refer to positions in ``nodes``. Parallel edges appear in
    insertion order.
    """
    node_list = list(graph.nodes)
    node_map = {node_id: i for i, node_id in enumerate(node_list)}

    return {
        "nodes": [{"id": node_to_json(node_id)} for node_id in node_list],
        "links": [
            {
                "source": node_map[src],
                "target": node_map[dst],
                "key": key,
                "weight": attr["weight"],
            }
            for src, dst, key, attr in graph.edges(keys=True, data=True)
        ],
    }


def node_link_to_graph(
    data: Dict[str, Any],
    node_factory: Optional[Callable[[Any], NodeID]] = None,
) -> LabeledMultiDiGraph:
    """
    Rebuild a LabeledMultiDiGraph from the output of `graph_to_node_link`.

    Args:
        data: Node-link mapping with ``nodes`` and ``links`` lists.
        node_factory: Optional callable turning a serialized node id back into
            a node (e.g. ``Point.from_dict``).

    Returns:
        A new graph with the same nodes, edges, keys and weights.

    Raises:
        ValueError: If a link refers to a node index that does not exist.
    """
    graph = LabeledMultiDiGraph()

    node_map: Dict[int, NodeID] = {}
    for idx, node_obj in enumerate(data.get("nodes", [])):
        node_id = node_obj["id"]
        if node_factory is not None:
            node_id = node_factory(node_id)
        graph.add_node(node_id)
        node_map[idx] = node_id

    for edge_obj in data.get("links", []):
        try:
            src_id = node_map[edge_obj["source"]]
            dst_id = node_map[edge_obj["target"]]
        except KeyError as exc:
            raise ValueError(f"Link {edge_obj!r} refers to an unknown node index.") from exc
        graph.add_edge(src_id, dst_id, edge_obj["weight"], key=edge_obj.get("key"))

    return graph
