from dataclasses import dataclass
from typing import Callable, Iterable, Tuple, TypeVar

from .edge import Edge
from .graph import Graph

N = TypeVar("N")


@dataclass
class FunctionGraph(Graph[N]):
    """
    Represents a graph whose edges are computed by a function. This is useful for
    node spaces that are too large (or infinite) to enumerate, where the caller
    bounds exploration through the function itself.

    :param neighbors_fn: Given a node, returns ``(dest, weight)`` pairs for every
        edge leaving it.
    """

    neighbors_fn: Callable[[N], Iterable[Tuple[N, float]]]

    def neighbors(self, node):
        return [Edge(weight, node, dest) for dest, weight in self.neighbors_fn(node)]
