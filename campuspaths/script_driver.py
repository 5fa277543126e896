"""Line-oriented command scripts for exercising graphs and path search.

A script is plain text with one command per line::

    # comment lines and blank lines are echoed as-is
    CreateGraph g1
    AddNode g1 A
    AddEdge g1 A B 2.5
    ListNodes g1
    ListChildren g1 A
    FindPath g1 A B

Each command writes its result to the output stream. A command that fails
(wrong argument count, unknown graph, bad number, ...) writes a two-line
diagnostic and the script continues with the next line.
"""

from __future__ import annotations

from typing import Callable, Dict, List, TextIO

from campuspaths.algorithms.dijkstra import find_path
from campuspaths.graph.labeled_multidigraph import LabeledMultiDiGraph
from campuspaths.logging import get_logger

logger = get_logger(__name__)


class CommandError(Exception):
    """Raised when a script command is malformed or names an unknown graph."""


class ScriptDriver:
    """Run graph command scripts from ``input`` and write results to ``output``.

    Graphs created by ``CreateGraph`` live in this driver instance only;
    every driver starts with an empty registry.
    """

    def __init__(self, input: TextIO, output: TextIO) -> None:
        self.input = input
        self.output = output
        self.graphs: Dict[str, LabeledMultiDiGraph] = {}
        self._commands: Dict[str, Callable[[List[str]], None]] = {
            "CreateGraph": self._create_graph,
            "AddNode": self._add_node,
            "AddEdge": self._add_edge,
            "ListNodes": self._list_nodes,
            "ListChildren": self._list_children,
            "FindPath": self._find_path,
        }

    def run_tests(self) -> None:
        """Execute every line of the input script."""
        for raw_line in self.input:
            line = raw_line.rstrip("\r\n")
            if not line.strip() or line.startswith("#"):
                self._println(line)
            else:
                command, *arguments = line.split()
                self.execute_command(command, arguments)
            self.output.flush()

    def execute_command(self, command: str, arguments: List[str]) -> None:
        """Run one command, reporting any failure on the output stream."""
        handler = self._commands.get(command)
        if handler is None:
            self._println(f"Unrecognized command: {command}")
            return
        try:
            handler(arguments)
        except Exception as exc:
            logger.debug("Command %s %s failed", command, arguments, exc_info=True)
            formatted = "".join([command] + [f" {arg}" for arg in arguments])
            self._println(f"Exception while running command: {formatted}")
            self._println(f"{type(exc).__name__}: {exc}")

    #
    # Commands
    #
    def _create_graph(self, arguments: List[str]) -> None:
        self._expect("CreateGraph", arguments, 1)
        (graph_name,) = arguments
        self.graphs[graph_name] = LabeledMultiDiGraph()
        self._println(f"created graph {graph_name}")

    def _add_node(self, arguments: List[str]) -> None:
        self._expect("AddNode", arguments, 2)
        graph_name, node_name = arguments
        self._graph(graph_name).add_node(node_name)
        self._println(f"added node {node_name} to {graph_name}")

    def _add_edge(self, arguments: List[str]) -> None:
        self._expect("AddEdge", arguments, 4)
        graph_name, parent_name, child_name, edge_label = arguments
        graph = self._graph(graph_name)
        weight = float(edge_label)
        graph.add_edge(parent_name, child_name, weight)
        self._println(
            f"added edge {weight:.3f} from {parent_name} to {child_name} in {graph_name}"
        )

    def _list_nodes(self, arguments: List[str]) -> None:
        self._expect("ListNodes", arguments, 1)
        (graph_name,) = arguments
        nodes = sorted(self._graph(graph_name).nodes)
        self._println(f"{graph_name} contains:" + "".join(f" {node}" for node in nodes))

    def _list_children(self, arguments: List[str]) -> None:
        self._expect("ListChildren", arguments, 2)
        graph_name, parent_name = arguments
        children = self._graph(graph_name).children_of(parent_name)
        listed = "".join(
            f" {child}({weight:.3f})"
            for child in sorted(children)
            for weight in sorted(children[child])
        )
        self._println(f"the children of {parent_name} in {graph_name} are:{listed}")

    def _find_path(self, arguments: List[str]) -> None:
        self._expect("FindPath", arguments, 3)
        graph_name, start_node, end_node = arguments
        graph = self._graph(graph_name)

        valid = True
        for node in (start_node, end_node):
            if not graph.contains_node(node):
                self._println(f"unknown: {node}")
                valid = False
        if not valid:
            return

        path = find_path(graph, start_node, end_node)
        self._println(f"path from {start_node} to {end_node}:")
        if path is None:
            self._println("no path found")
            return
        for segment in path:
            self._println(
                f"{segment.start} to {segment.end} with weight {segment.cost:.3f}"
            )
        self._println(f"total cost: {path.cost:.3f}")

    #
    # Helpers
    #
    def _graph(self, graph_name: str) -> LabeledMultiDiGraph:
        if graph_name not in self.graphs:
            raise CommandError(f"Unknown graph: {graph_name}")
        return self.graphs[graph_name]

    @staticmethod
    def _expect(command: str, arguments: List[str], count: int) -> None:
        if len(arguments) != count:
            raise CommandError(f"Bad arguments to {command}: {arguments}")

    def _println(self, text: str) -> None:
        self.output.write(text + "\n")
