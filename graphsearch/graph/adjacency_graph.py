import collections.abc
from typing import Dict, Hashable, Iterable, Mapping, Optional, Tuple, TypeVar, Union

from .edge import Edge
from .graph import NodeGraph

N = TypeVar("N", bound=Hashable)


class AdjacencyGraph(NodeGraph[N]):
    """
    A graph backed by an adjacency mapping. Each key maps either to a mapping of
    ``dest -> weight`` or to an iterable of destinations, which are given weight 1.
    Destinations that do not appear as keys are still nodes of the graph, with no
    outbound edges.

    The adjacency is copied on construction; the caller's mapping is never mutated.

    :param adjacency: The adjacency mapping.
    """

    def __init__(
        self,
        adjacency: Optional[Mapping[N, Union[Mapping[N, float], Iterable[N]]]] = None,
    ):
        self._adjacency: Dict[N, Dict[N, float]] = {}
        for source, dests in (adjacency or {}).items():
            self._adjacency.setdefault(source, {})
            if isinstance(dests, collections.abc.Mapping):
                items = dests.items()
            else:
                items = ((dest, 1) for dest in dests)
            for dest, weight in items:
                self.add_edge(source, dest, weight)

    @classmethod
    def undirected(cls, pairs: Iterable[Tuple[N, N]]) -> "AdjacencyGraph[N]":
        """
        Build a graph with unit-weight edges in both directions for every pair.
        """
        graph = cls()
        for a, b in pairs:
            graph.add_edge(a, b)
            graph.add_edge(b, a)
        return graph

    def add_edge(self, source: N, dest: N, weight: float = 1):
        """
        Add (or reweight) the directed edge from ``source`` to ``dest``.
        """
        self._adjacency.setdefault(source, {})[dest] = weight
        self._adjacency.setdefault(dest, {})

    def remove_edge(self, a: N, b: N):
        """
        Remove the connection between ``a`` and ``b`` in both directions.

        :raises KeyError: If either direction of the edge is not present.
        """
        for source, dest in ((a, b), (b, a)):
            if dest not in self._adjacency.get(source, {}):
                raise KeyError(f"No edge from {source!r} to {dest!r}")
        del self._adjacency[a][b]
        del self._adjacency[b][a]

    def neighbors(self, node):
        return [
            Edge(weight, node, dest)
            for dest, weight in self._adjacency.get(node, {}).items()
        ]

    def nodes(self):
        return list(self._adjacency)

    def __contains__(self, node):
        return node in self._adjacency

    def __len__(self):
        return len(self._adjacency)
