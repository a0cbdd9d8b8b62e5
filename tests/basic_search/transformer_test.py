import unittest

import graphsearch as gs

from .search_test import diamond, grid_graph


class CountingGraph(gs.Graph):
    def __init__(self, graph):
        self.graph = graph
        self.calls = []

    def neighbors(self, node):
        self.calls.append(node)
        return self.graph.neighbors(node)


class NoHeavyEdges(gs.FilterEdgesGraph):
    def __init__(self, graph, max_weight):
        super().__init__(graph)
        self.max_weight = max_weight

    def include_edge(self, edge):
        return edge.weight <= self.max_weight


class TestCachedGraph(unittest.TestCase):
    def test_memoizes(self):
        counting = CountingGraph(grid_graph(4, 4))
        cached = gs.CachedGraph(counting)
        first = cached.shortest_path((0, 0), lambda node: node == (3, 3))
        calls = len(counting.calls)
        self.assertEqual(calls, cached.cache_size)
        second = cached.shortest_path((0, 0), lambda node: node == (3, 3))
        self.assertEqual(first, second)
        self.assertEqual(len(counting.calls), calls)

    def test_clear_cache(self):
        counting = CountingGraph(grid_graph(3, 3))
        cached = gs.CachedGraph(counting)
        cached.bfs_all((0, 0))
        self.assertEqual(cached.cache_size, 9)
        cached.clear_cache()
        self.assertEqual(cached.cache_size, 0)
        cached.bfs_all((0, 0))
        self.assertEqual(len(counting.calls), 18)

    def test_returned_list_is_a_copy(self):
        cached = gs.CachedGraph(gs.AdjacencyGraph(diamond))
        cached.neighbors("S").clear()
        self.assertEqual(len(cached.neighbors("S")), 2)

    def test_instances_do_not_share(self):
        a = gs.CachedGraph(gs.AdjacencyGraph(diamond))
        b = gs.CachedGraph(gs.AdjacencyGraph(diamond))
        a.neighbors("S")
        self.assertEqual(a.cache_size, 1)
        self.assertEqual(b.cache_size, 0)


class TestFilterEdges(unittest.TestCase):
    def test_filter(self):
        g = gs.AdjacencyGraph({"a": {"c": 1, "b": 1}, "b": {"c": 1}})
        self.assertEqual(
            gs.shortest_path(g, "a", lambda node: node == "c").cost, 1
        )
        g = gs.AdjacencyGraph({"a": {"c": 9, "b": 1}, "b": {"c": 1}})
        self.assertEqual(
            gs.shortest_path(NoHeavyEdges(g, 10), "a", lambda node: node == "c").cost,
            2,
        )
        path = gs.shortest_path(NoHeavyEdges(g, 0), "a", lambda node: node == "c")
        self.assertIsNone(path)


class TestLimitEdges(unittest.TestCase):
    def test_limit(self):
        limited = gs.LimitEdgesGraph(gs.AdjacencyGraph(diamond), 1)
        self.assertEqual(set(gs.bfs_all(limited, "S")), {"S", "A", "T"})

    def test_zero(self):
        limited = gs.LimitEdgesGraph(gs.AdjacencyGraph(diamond), 0)
        self.assertEqual(list(gs.bfs_all(limited, "S")), ["S"])
