import itertools
import random

import networkx as nx
import pytest

from campuspaths.algorithms.dijkstra import find_path
from campuspaths.graph.labeled_multidigraph import LabeledMultiDiGraph, UnknownNodeError
from campuspaths.model.path import Segment


class TestFindPath:
    def test_two_hops(self, campus_graph):
        path = find_path(campus_graph, "A", "C")
        assert path is not None
        assert path.cost == 20.0
        assert list(path) == [Segment("A", "B", 10.0), Segment("B", "C", 10.0)]

    def test_three_hops(self, campus_graph):
        path = find_path(campus_graph, "A", "Z")
        assert path is not None
        assert path.cost == 24.0
        assert path.nodes == ("A", "B", "B2", "Z")

    def test_disconnected_returns_none(self, campus_graph):
        assert find_path(campus_graph, "A", "Q") is None

    def test_direction_matters(self, campus_graph):
        assert find_path(campus_graph, "Q", "W") is None
        assert find_path(campus_graph, "Z", "A") is None

    def test_start_equals_end(self, campus_graph):
        path = find_path(campus_graph, "B", "B")
        assert path is not None
        assert path.cost == 0.0
        assert len(path) == 0
        assert path.start == path.end == "B"

    def test_parallel_edges_use_minimum(self, parallel_edges):
        path = find_path(parallel_edges, "A", "B")
        assert path is not None
        assert path.cost == 2.0
        assert list(path) == [Segment("A", "B", 2.0)]

        path = find_path(parallel_edges, "A", "C")
        assert path is not None
        assert path.cost == 3.0

    def test_cheaper_longer_route_preferred(self):
        g = LabeledMultiDiGraph()
        g.add_edge("S", "T", 10.0)
        g.add_edge("S", "M1", 1.0)
        g.add_edge("M1", "M2", 1.0)
        g.add_edge("M2", "T", 1.0)
        path = find_path(g, "S", "T")
        assert path is not None
        assert path.nodes == ("S", "M1", "M2", "T")
        assert path.cost == 3.0

    def test_self_loops_ignored(self):
        g = LabeledMultiDiGraph()
        g.add_edge("A", "A", 0.0)
        g.add_edge("A", "B", 1.0)
        path = find_path(g, "A", "B")
        assert path is not None
        assert path.nodes == ("A", "B")

    def test_zero_weight_edges(self):
        g = LabeledMultiDiGraph()
        g.add_edge("A", "B", 0.0)
        g.add_edge("B", "C", 0.0)
        path = find_path(g, "A", "C")
        assert path is not None
        assert path.cost == 0.0
        assert len(path) == 2

    def test_isolated_end_node(self):
        g = LabeledMultiDiGraph()
        g.add_edge("A", "B", 1.0)
        g.add_node("C")
        assert find_path(g, "A", "C") is None

    def test_unknown_start_raises(self, campus_graph):
        with pytest.raises(UnknownNodeError):
            find_path(campus_graph, "nowhere", "A")

    def test_equal_cost_ties_follow_insertion_order(self):
        # A -> B -> D and A -> C -> D both cost 2
        g = LabeledMultiDiGraph()
        g.add_edge("A", "B", 1.0)
        g.add_edge("A", "C", 1.0)
        g.add_edge("B", "D", 1.0)
        g.add_edge("C", "D", 1.0)
        first = find_path(g, "A", "D")
        assert first is not None
        assert first.nodes == ("A", "B", "D")
        # Same graph, same answer
        assert find_path(g, "A", "D") == first

    def test_graph_not_mutated(self, campus_graph):
        before = sorted(campus_graph.edges(keys=True, data="weight"))
        find_path(campus_graph, "A", "Z")
        assert sorted(campus_graph.edges(keys=True, data="weight")) == before

    def test_symmetric_graph_reversed_path(self, square_symmetric):
        for a, b in itertools.permutations(["A", "B", "C", "D", "E"], 2):
            forward = find_path(square_symmetric, a, b)
            backward = find_path(square_symmetric, b, a)
            assert forward is not None and backward is not None
            assert forward.cost == backward.cost
            for seg_f, seg_b in zip(list(forward), reversed(list(backward))):
                assert seg_f.start == seg_b.end
                assert seg_f.end == seg_b.start
                assert seg_f.cost == seg_b.cost

    def test_bidirectional_campus(self, campus_graph):
        forward = find_path(campus_graph, "A", "C")
        backward = find_path(campus_graph, "C", "A")
        assert forward is not None and backward is not None
        assert forward.nodes == tuple(reversed(backward.nodes))
        assert forward.cost == backward.cost

    def test_point_like_tuple_nodes(self):
        g = LabeledMultiDiGraph()
        g.add_edge((0, 0), (0, 1), 1.0)
        g.add_edge((0, 1), (1, 1), 1.0)
        g.add_edge((0, 0), (1, 1), 5.0)
        path = find_path(g, (0, 0), (1, 1))
        assert path is not None
        assert path.cost == 2.0


@pytest.mark.parametrize("seed", range(5))
def test_matches_networkx_on_random_graphs(seed):
    """The returned cost equals networkx's Dijkstra distance on random multigraphs."""
    rng = random.Random(seed)
    g = LabeledMultiDiGraph()
    nodes = list(range(12))
    for node in nodes:
        g.add_node(node)
    for _ in range(40):
        u, v = rng.choice(nodes), rng.choice(nodes)
        g.add_edge(u, v, round(rng.uniform(0, 20), 2))

    # networkx picks the minimum among parallel edges for a multigraph
    for src, dst in itertools.product(nodes[:4], nodes):
        path = find_path(g, src, dst)
        try:
            expected = nx.dijkstra_path_length(g, src, dst, weight="weight")
        except nx.NetworkXNoPath:
            assert path is None
            continue
        assert path is not None
        assert path.cost == pytest.approx(expected)
        assert path.start == src and path.end == dst
        # Each hop uses the cheapest parallel edge
        for seg in path:
            assert seg.cost == min(g.children_of(seg.start)[seg.end])
