from dataclasses import dataclass
from typing import Callable, Optional, TypeVar

from graphsearch.graph.edge import Path
from graphsearch.graph.graph import Graph

from .frontier import BestFirstSearch, search_for_goal
from .search_strategy import SearchStrategy

X = TypeVar("X")


def shortest_path(
    g: Graph[X],
    start: X,
    is_goal: Callable[[X], bool],
    *,
    max_expansions: Optional[int] = None,
) -> Optional[Path[X]]:
    """
    Performs Dijkstra's algorithm on the given graph, returning the cheapest path from
    ``start`` to the first node satisfying ``is_goal``. Requires non-negative edge weights.

    :param g: Graph to search over
    :param start: Node to start from
    :param is_goal: Predicate identifying goal nodes
    :param max_expansions: Maximum number of nodes to finalize before giving up

    :return: The cheapest path, or None if no goal node is reachable.
    """
    return search_for_goal(
        BestFirstSearch(g, start, max_expansions=max_expansions), is_goal
    )


@dataclass
class DijkstraSearch(SearchStrategy):
    """
    Searches with Dijkstra's algorithm. See ``shortest_path``.

    :param max_expansions: Maximum number of nodes to finalize. If None, no limit is applied.
    """

    max_expansions: Optional[int] = None

    def search(self, graph, start, is_goal):
        return shortest_path(
            graph, start, is_goal, max_expansions=self.max_expansions
        )
