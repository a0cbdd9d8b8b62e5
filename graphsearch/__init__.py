from graphsearch.disjoint_set.disjoint_set import DisjointSet, UnknownElementError
from graphsearch.graph.adjacency_graph import AdjacencyGraph
from graphsearch.graph.edge import CostOverflowError, Edge, Path
from graphsearch.graph.function_graph import FunctionGraph
from graphsearch.graph.graph import Graph, GraphContractError, NodeGraph
from graphsearch.graph.graph_transformer import (
    CachedGraph,
    FilterEdgesGraph,
    LimitEdgesGraph,
)
from graphsearch.search.astar_search import AStarSearch, a_star
from graphsearch.search.bfs_search import bfs_all
from graphsearch.search.dijkstra import DijkstraSearch, shortest_path
from graphsearch.search.search_strategy import SearchStrategy
from graphsearch.utils.interner import Interner

from . import search

__version__ = "0.1.0"
