from abc import ABC, abstractmethod
from typing import Callable, Generic, List, Mapping, Optional, TypeVar

from .edge import Edge, Path

N = TypeVar("N")


class GraphContractError(Exception):
    """
    Raised when a graph's ``neighbors`` produces an edge the search engine cannot use,
    e.g. one with a negative weight or one that does not leave the expanded node.
    """


class Graph(ABC, Generic[N]):
    """
    Represents a graph where nodes are arbitrary hashable objects and edges are
    produced on demand by ``neighbors``. This is the only method a graph needs to
    implement; the search algorithms are provided as methods for convenience and
    are also available as functions in ``graphsearch.search``.
    """

    @abstractmethod
    def neighbors(self, node: N) -> List[Edge[N]]:
        """
        Return every directed edge leaving ``node``. Each edge must have a
        non-negative weight and ``node`` as its source.
        """

    def shortest_path(
        self,
        start: N,
        is_goal: Callable[[N], bool],
        *,
        max_expansions: Optional[int] = None,
    ) -> Optional[Path[N]]:
        """
        Find the cheapest path from ``start`` to any node satisfying ``is_goal``
        using Dijkstra's algorithm. See ``graphsearch.search.shortest_path``.
        """
        # pylint: disable=import-outside-toplevel,cyclic-import
        from graphsearch.search.dijkstra import shortest_path

        return shortest_path(self, start, is_goal, max_expansions=max_expansions)

    def a_star(
        self,
        start: N,
        is_goal: Callable[[N], bool],
        heuristic: Callable[[N], float],
        *,
        max_expansions: Optional[int] = None,
    ) -> Optional[Path[N]]:
        """
        Find the cheapest path from ``start`` to any node satisfying ``is_goal``
        using A*. See ``graphsearch.search.a_star``.
        """
        # pylint: disable=import-outside-toplevel,cyclic-import
        from graphsearch.search.astar_search import a_star

        return a_star(
            self, start, is_goal, heuristic, max_expansions=max_expansions
        )

    def bfs_all(
        self, start: N, *, max_expansions: Optional[int] = None
    ) -> Mapping[N, Path[N]]:
        """
        Find the best path from ``start`` to every reachable node.
        See ``graphsearch.search.bfs_all``.
        """
        # pylint: disable=import-outside-toplevel,cyclic-import
        from graphsearch.search.bfs_search import bfs_all

        return bfs_all(self, start, max_expansions=max_expansions)


class NodeGraph(Graph[N]):
    """
    A graph that can additionally enumerate all of its nodes. This is required by
    algorithms that need the full node set, such as finding connected components.
    """

    @abstractmethod
    def nodes(self) -> List[N]:
        """
        Return every node in the graph.
        """

    def forest(self) -> List[List[N]]:
        """
        Partition the graph into its connected components, ignoring edge direction.

        Components are ordered by the position of their first node in ``nodes()``,
        and the members of each component are in discovery order.
        """
        nodes = self.nodes()
        undirected = {node: [] for node in nodes}
        for node in nodes:
            for edge in self.neighbors(node):
                undirected.setdefault(edge.dest, []).append(node)
                undirected[node].append(edge.dest)
        seen = set()
        components = []
        for root in nodes:
            if root in seen:
                continue
            seen.add(root)
            component = [root]
            # component doubles as the queue; idx is the read head
            idx = 0
            while idx < len(component):
                for other in undirected[component[idx]]:
                    if other not in seen:
                        seen.add(other)
                        component.append(other)
                idx += 1
            components.append(component)
        return components

    def graphviz(self, directed: bool = True) -> str:
        """
        Render the graph in Graphviz DOT format.

        :param directed: If True, emit a ``digraph`` with one line per edge, labelling
            edges whose weight is not 1. Otherwise emit a ``graph`` with one line per
            unordered pair of connected nodes.
        """
        lines = ["digraph {" if directed else "graph {"]
        written = set()
        for node in self.nodes():
            lines.append(f"  {_dot_id(node)};")
        for node in self.nodes():
            for edge in self.neighbors(node):
                if directed:
                    attrs = "" if edge.weight == 1 else f" [label={edge.weight}]"
                    lines.append(
                        f"  {_dot_id(edge.source)} -> {_dot_id(edge.dest)}{attrs};"
                    )
                    continue
                pair = frozenset((edge.source, edge.dest))
                if pair in written:
                    continue
                written.add(pair)
                lines.append(f"  {_dot_id(edge.source)} -- {_dot_id(edge.dest)};")
        lines.append("}")
        return "\n".join(lines) + "\n"


def _dot_id(node) -> str:
    escaped = str(node).replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'
