from .adjacency_graph import AdjacencyGraph
from .edge import CostOverflowError, Edge, Path
from .function_graph import FunctionGraph
from .graph import Graph, GraphContractError, NodeGraph
from .graph_transformer import CachedGraph, FilterEdgesGraph, LimitEdgesGraph
