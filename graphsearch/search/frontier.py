import heapq
import itertools
import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Generic, Iterator, List, Optional, TypeVar

from graphsearch.graph.edge import Edge, Path, add_costs
from graphsearch.graph.graph import Graph, GraphContractError

N = TypeVar("N")

logger = logging.getLogger(__name__)


class BestFirstSearch(Generic[N]):
    """
    The priority frontier shared by Dijkstra, A* and ``bfs_all``. Nodes are
    finalized in order of ``cost + heuristic(node)``; once a node is finalized its
    cost is never revised and it is never expanded again.

    Ties are broken by insertion order, so the result is stable for a graph whose
    ``neighbors`` returns edges in a fixed order.

    :param graph: The graph to search. It is never mutated.
    :param start: The node to search from.
    :param heuristic: Estimated remaining cost from a node, or None for Dijkstra.
    :param max_expansions: Stop after this many nodes have been finalized.
    """

    def __init__(
        self,
        graph: Graph[N],
        start: N,
        heuristic: Optional[Callable[[N], float]] = None,
        max_expansions: Optional[int] = None,
    ):
        assert max_expansions is None or max_expansions >= 0
        self.graph = graph
        self.start = start
        self.heuristic = heuristic
        self.max_expansions = max_expansions
        self.best_cost: Dict[N, float] = {start: 0}
        self.best_edge: Dict[N, Edge[N]] = {}
        self.finalized: List[N] = []
        self._finalized_set = set()
        self._fringe: List[_FrontierNode] = []
        self._sequence = itertools.count()
        self._add_to_fringe(start, 0)

    def _add_to_fringe(self, node, cost):
        priority = cost
        if self.heuristic is not None:
            priority = cost + self.heuristic(node)
        heapq.heappush(
            self._fringe, _FrontierNode(priority, next(self._sequence), node)
        )

    def _checked_neighbors(self, node):
        for edge in self.graph.neighbors(node):
            if edge.weight < 0:
                raise GraphContractError(f"Negative edge weight: {edge}")
            if edge.source != node:
                raise GraphContractError(
                    f"Edge {edge} does not leave the expanded node {node!r}"
                )
            yield edge

    def expand(self) -> Iterator[N]:
        """
        Yield each node as it is finalized, in order of increasing priority.
        """
        while self._fringe:
            node = heapq.heappop(self._fringe).node
            if node in self._finalized_set:
                continue
            if (
                self.max_expansions is not None
                and len(self.finalized) >= self.max_expansions
            ):
                logger.debug(
                    "Search budget of %d expansions exhausted", self.max_expansions
                )
                return
            self._finalized_set.add(node)
            self.finalized.append(node)
            yield node
            cost = self.best_cost[node]
            for edge in self._checked_neighbors(node):
                if edge.dest in self._finalized_set:
                    continue
                new_cost = add_costs(cost, edge.weight)
                if edge.dest in self.best_cost and self.best_cost[edge.dest] <= new_cost:
                    continue
                self.best_cost[edge.dest] = new_cost
                self.best_edge[edge.dest] = edge
                self._add_to_fringe(edge.dest, new_cost)

    def path_to(self, node: N) -> Path[N]:
        """
        Reconstruct the best known path from the start to ``node``.
        """
        edges = []
        while node != self.start:
            edge = self.best_edge[node]
            edges.append(edge)
            node = edge.source
        return Path(self.start, tuple(reversed(edges)))


def search_for_goal(
    search: BestFirstSearch[N], is_goal: Callable[[N], bool]
) -> Optional[Path[N]]:
    """
    Run ``search`` until a node satisfying ``is_goal`` is finalized, returning the
    path to it, or None if the reachable space (or the budget) runs out first.
    """
    for node in search.expand():
        if is_goal(node):
            path = search.path_to(node)
            logger.debug(
                "Reached goal %r after finalizing %d nodes, cost %s",
                node,
                len(search.finalized),
                search.best_cost[node],
            )
            return path
    logger.debug("No goal reachable after finalizing %d nodes", len(search.finalized))
    return None


@dataclass(order=True)
class _FrontierNode:
    """
    An entry in the frontier, ordered by priority and then by insertion order.
    """

    priority: float
    sequence: int
    node: N = field(compare=False)
