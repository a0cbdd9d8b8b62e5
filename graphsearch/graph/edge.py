import math
from dataclasses import dataclass
from typing import Generic, Iterator, Tuple, TypeVar

N = TypeVar("N")


class CostOverflowError(OverflowError):
    """
    Raised when the accumulated cost of a path is no longer a finite number.
    """


@dataclass(frozen=True)
class Edge(Generic[N]):
    """
    A single directed, weighted connection between two nodes. Edges are produced on
    demand by ``Graph.neighbors`` and are never stored by the search engine beyond
    a single query.

    :field weight: The cost of traversing this edge. Must be non-negative.
    :field source: The node this edge leaves.
    :field dest: The node this edge arrives at.
    """

    weight: float
    source: N
    dest: N


def add_costs(total, weight):
    """
    Add ``weight`` to ``total``, raising ``CostOverflowError`` if the result is not finite.
    """
    result = total + weight
    if isinstance(result, float) and not math.isfinite(result):
        raise CostOverflowError(f"Path cost overflowed adding {weight} to {total}")
    return result


@dataclass(frozen=True)
class Path(Generic[N]):
    """
    An ordered sequence of edges from ``start`` to a goal node, in traversal order.
    A path from a node to itself has no edges.

    :field start: The node the path begins at.
    :field edges: The edges of the path, each edge's source being the previous edge's dest.
    """

    start: N
    edges: Tuple[Edge[N], ...] = ()

    def __post_init__(self):
        current = self.start
        for edge in self.edges:
            assert edge.source == current, f"Disconnected path at {edge}"
            current = edge.dest

    @property
    def goal(self) -> N:
        """
        The last node of the path; the start node if the path is empty.
        """
        if not self.edges:
            return self.start
        return self.edges[-1].dest

    @property
    def cost(self):
        """
        The sum of the weights of the path's edges.
        """
        total = 0
        for edge in self.edges:
            total = add_costs(total, edge.weight)
        return total

    @property
    def nodes(self) -> Tuple[N, ...]:
        """
        Every node visited by the path, including the start and the goal.
        """
        return (self.start,) + tuple(edge.dest for edge in self.edges)

    def extend(self, edge: Edge[N]) -> "Path[N]":
        """
        Return a new path with ``edge`` appended. This path is not mutated.
        """
        return Path(self.start, self.edges + (edge,))

    def __len__(self):
        return len(self.edges)

    def __iter__(self) -> Iterator[Edge[N]]:
        return iter(self.edges)
