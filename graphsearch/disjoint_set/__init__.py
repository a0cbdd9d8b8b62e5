from .disjoint_set import DisjointSet, UnknownElementError
