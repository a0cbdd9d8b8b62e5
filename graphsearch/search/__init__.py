from .astar_search import AStarSearch, a_star
from .bfs_search import bfs_all
from .dijkstra import DijkstraSearch, shortest_path
from .search_strategy import SearchStrategy
