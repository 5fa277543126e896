"""Shared pytest fixtures: sample graphs and a small campus map."""

from __future__ import annotations

from pathlib import Path

import pytest

from campuspaths.campus_map import CampusMap
from campuspaths.graph.labeled_multidigraph import LabeledMultiDiGraph


@pytest.fixture
def campus_graph():
    # Two components:
    #
    #   A ◄──10──► B ◄──10──► C        W ──3──► Q
    #              │
    #              10
    #              ▼
    #              B2 ──4──► Z
    g = LabeledMultiDiGraph()
    g.add_edge("A", "B", 10.0)
    g.add_edge("B", "A", 10.0)
    g.add_edge("B", "C", 10.0)
    g.add_edge("B", "B2", 10.0)
    g.add_edge("C", "B", 10.0)
    g.add_edge("B2", "Z", 4.0)
    g.add_edge("W", "Q", 3.0)
    return g


@pytest.fixture
def parallel_edges():
    # A ──[5, 2]──► B ──[1]──► C
    g = LabeledMultiDiGraph()
    g.add_edge("A", "B", 5.0)
    g.add_edge("A", "B", 2.0)
    g.add_edge("B", "C", 1.0)
    return g


@pytest.fixture
def square_symmetric():
    # Every edge has an equal-weight reverse edge.
    #
    #   A ──1── B
    #   │       │
    #   4       1
    #   │       │
    #   D ──1── C ──7── E
    g = LabeledMultiDiGraph()
    for u, v, w in [
        ("A", "B", 1.0),
        ("B", "C", 1.0),
        ("C", "D", 1.0),
        ("A", "D", 4.0),
        ("C", "E", 7.0),
    ]:
        g.add_edge(u, v, w)
        g.add_edge(v, u, w)
    return g


@pytest.fixture
def map_files(tmp_path: Path):
    """Write a small pair of map CSV files and return their paths."""
    paths_file = tmp_path / "campus_paths.csv"
    buildings_file = tmp_path / "campus_buildings.csv"
    paths_file.write_text(
        "x1,y1,x2,y2,distance\n"
        "0.0,0.0,10.0,0.0,10.0\n"
        "10.0,0.0,0.0,0.0,10.0\n"
        "10.0,0.0,10.0,10.0,5.0\n"
        "10.0,10.0,10.0,0.0,5.0\n"
        "0.0,0.0,10.0,10.0,20.0\n"
        "10.0,10.0,0.0,0.0,20.0\n",
        encoding="utf-8",
    )
    buildings_file.write_text(
        "shortName,longName,x,y\n"
        "AAA,Alpha Hall,0.0,0.0\n"
        "BBB,Beta Library,10.0,10.0\n"
        "CCC,Gamma Annex,50.0,50.0\n",
        encoding="utf-8",
    )
    return paths_file, buildings_file


@pytest.fixture
def small_campus(map_files) -> CampusMap:
    paths_file, buildings_file = map_files
    return CampusMap.from_files(paths_file, buildings_file)

