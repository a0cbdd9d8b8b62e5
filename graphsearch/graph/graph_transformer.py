import itertools
from abc import abstractmethod

from .edge import Edge
from .graph import Graph


class CachedGraph(Graph):
    """
    Memoizes the neighbors of each node of the underlying graph. The cache belongs
    to this instance only and is not safe for concurrent mutation.

    :param graph: The graph to cache the neighbors of.
    """

    def __init__(self, graph: Graph):
        self.graph = graph
        self._cache = {}

    def neighbors(self, node):
        if node not in self._cache:
            self._cache[node] = list(self.graph.neighbors(node))
        return list(self._cache[node])

    def clear_cache(self):
        """
        Forget every memoized neighbor list.
        """
        self._cache.clear()

    @property
    def cache_size(self) -> int:
        """
        The number of nodes whose neighbors are currently memoized.
        """
        return len(self._cache)


class FilterEdgesGraph(Graph):
    """
    Abstract class for graphs that filter edges based on some criterion.
    """

    def __init__(self, graph: Graph):
        self.graph = graph

    @abstractmethod
    def include_edge(self, edge: Edge) -> bool:
        """
        Returns True if the edge should be included in the graph.
        """

    def neighbors(self, node):
        return [edge for edge in self.graph.neighbors(node) if self.include_edge(edge)]


class LimitEdgesGraph(Graph):
    """
    Limits the number of edges that can be expanded from a node, by only expanding the first
    ``limit`` edges.

    :param graph: The graph to limit the edges of.
    :param limit: The limit on the number of edges to expand.
    """

    def __init__(self, graph: Graph, limit: int):
        assert limit >= 0
        self.graph = graph
        self.limit = limit

    def neighbors(self, node):
        return list(itertools.islice(self.graph.neighbors(node), self.limit))
