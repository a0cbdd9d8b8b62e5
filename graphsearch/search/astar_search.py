from dataclasses import dataclass
from typing import Callable, Optional, TypeVar

from graphsearch.graph.edge import Path
from graphsearch.graph.graph import Graph

from .frontier import BestFirstSearch, search_for_goal
from .search_strategy import SearchStrategy

X = TypeVar("X")


def a_star(
    g: Graph[X],
    start: X,
    is_goal: Callable[[X], bool],
    heuristic: Callable[[X], float],
    *,
    max_expansions: Optional[int] = None,
) -> Optional[Path[X]]:
    """
    Performs an A* search on the given graph, expanding nodes in order of accumulated
    cost plus ``heuristic(node)``.

    The result is only guaranteed to be a cheapest path if the heuristic is admissible
    (never overestimates the remaining cost) and consistent. This is not checked; an
    inadmissible heuristic produces a valid but possibly more expensive path.

    A* is an optimization over ``shortest_path``, not a different answer. When the
    heuristic does little to narrow the search (e.g. start and goal in opposite
    corners of a grid) plain Dijkstra can be just as fast.

    :param g: Graph to search over
    :param start: Node to start from
    :param is_goal: Predicate identifying goal nodes
    :param heuristic: Estimated remaining cost from a node to the nearest goal
    :param max_expansions: Maximum number of nodes to finalize before giving up
    """
    return search_for_goal(
        BestFirstSearch(g, start, heuristic, max_expansions=max_expansions), is_goal
    )


@dataclass
class AStarSearch(SearchStrategy):
    """
    Searches with A* using a fixed heuristic. See ``a_star``.

    :param heuristic: Estimated remaining cost from a node to the nearest goal.
    :param max_expansions: Maximum number of nodes to finalize. If None, no limit is applied.
    """

    heuristic: Callable
    max_expansions: Optional[int] = None

    def search(self, graph, start, is_goal):
        return a_star(
            graph, start, is_goal, self.heuristic, max_expansions=self.max_expansions
        )
