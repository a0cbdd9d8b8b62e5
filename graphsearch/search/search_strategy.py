from abc import ABC, abstractmethod
from typing import Callable, Optional

from typing_extensions import TypeVar

from graphsearch.graph.edge import Path
from graphsearch.graph.graph import Graph

X = TypeVar("X")


class SearchStrategy(ABC):
    """
    A way of finding a cheapest path in a graph. Strategies are interchangeable:
    every strategy returns a path of the same (optimal) cost when its
    preconditions hold, though not necessarily the same path.
    """

    @abstractmethod
    def search(
        self, graph: Graph[X], start: X, is_goal: Callable[[X], bool]
    ) -> Optional[Path[X]]:
        """Find a cheapest path from ``start`` to a node satisfying ``is_goal``.

        Args:
            graph (Graph): The graph to search.
            start: The node to start from.
            is_goal: Predicate identifying goal nodes.

        Returns:
            Path: The path found, or None if no goal is reachable.
        """
