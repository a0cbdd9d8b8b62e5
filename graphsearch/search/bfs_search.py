import logging
from typing import Mapping, Optional, TypeVar

from frozendict import frozendict

from graphsearch.graph.edge import Path
from graphsearch.graph.graph import Graph

from .frontier import BestFirstSearch

X = TypeVar("X")

logger = logging.getLogger(__name__)


def bfs_all(
    g: Graph[X], start: X, *, max_expansions: Optional[int] = None
) -> Mapping[X, Path[X]]:
    """
    Explores everything reachable from ``start``, returning the best path found to
    each reachable node. ``start`` itself maps to the empty path. With unit weights
    this is a breadth-first search; with other weights, paths are cheapest-first.

    :param g: Graph to search over
    :param start: Node to start from
    :param max_expansions: Maximum number of nodes to finalize. If the budget runs
        out, only the nodes finalized so far are returned.

    :return: An immutable mapping from each reachable node to its path, in the order
        the nodes were finalized.
    """
    search = BestFirstSearch(g, start, max_expansions=max_expansions)
    for _ in search.expand():
        pass
    logger.debug("Explored %d nodes from %r", len(search.finalized), start)
    return frozendict({node: search.path_to(node) for node in search.finalized})
