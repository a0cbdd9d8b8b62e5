from typing import Dict, Generic, Hashable, Iterable, List, Tuple, TypeVar

import numpy as np

E = TypeVar("E", bound=Hashable)

_SIZE_DTYPE = np.int64


class UnknownElementError(KeyError):
    """
    Raised when a disjoint set is queried for an element it was not constructed with.
    """


class DisjointSet(Generic[E]):
    """
    Tracks a partition of a fixed collection of elements into disjoint sets, with
    union by size and path-compressed find.

    Elements are assigned stable indices on construction. Each set is a tree over
    those indices; the root of each tree holds the size of its set, while the
    sizes stored at non-root indices are stale and never read.

    :param elements: The elements to partition, each initially in its own set.
        Elements must be distinct; duplicates are not detected.
    """

    def __init__(self, elements: Iterable[E]):
        self._elements: Tuple[E, ...] = tuple(elements)
        self._index: Dict[E, int] = {e: i for i, e in enumerate(self._elements)}
        self._parents = np.arange(len(self._elements), dtype=_SIZE_DTYPE)
        self._sizes = np.ones(len(self._elements), dtype=_SIZE_DTYPE)

    def _index_of(self, element: E) -> int:
        try:
            return self._index[element]
        except KeyError:
            raise UnknownElementError(element) from None

    def _find_idx(self, idx: int) -> int:
        root = idx
        while self._parents[root] != root:
            root = int(self._parents[root])
        # point everything on the walk directly at the root
        while idx != root:
            parent = int(self._parents[idx])
            self._parents[idx] = root
            idx = parent
        return root

    def find(self, element: E) -> E:
        """
        Return the representative of the set containing ``element``.

        :raises UnknownElementError: If ``element`` is not part of this disjoint set.
        """
        return self._elements[self._find_idx(self._index_of(element))]

    def set_size(self, element: E) -> int:
        """
        Return the number of elements in the set containing ``element``.
        """
        return int(self._sizes[self._find_idx(self._index_of(element))])

    def union(self, a: E, b: E) -> bool:
        """
        Merge the sets containing ``a`` and ``b``, attaching the smaller set's root
        under the larger set's root.

        :return: True if the sets were merged, False if they were already the same set.
        :raises OverflowError: If the merged size does not fit in the size array.
        """
        root_a = self._find_idx(self._index_of(a))
        root_b = self._find_idx(self._index_of(b))
        if root_a == root_b:
            return False
        if self._sizes[root_a] < self._sizes[root_b]:
            root_a, root_b = root_b, root_a
        merged = int(self._sizes[root_a]) + int(self._sizes[root_b])
        if merged > np.iinfo(_SIZE_DTYPE).max:
            raise OverflowError(f"Set size {merged} exceeds {_SIZE_DTYPE.__name__}")
        self._parents[root_b] = root_a
        self._sizes[root_a] = merged
        return True

    def roots(self) -> List[E]:
        """
        Return one representative per distinct set, in construction order.
        """
        is_root = self._parents == np.arange(len(self._elements))
        return [self._elements[i] for i in np.flatnonzero(is_root)]

    def groups(self) -> List[List[E]]:
        """
        Return the members of every set, grouped by representative. Groups are ordered
        by their first member in construction order, as are the members of each group.
        """
        groups: Dict[int, List[E]] = {}
        for idx, element in enumerate(self._elements):
            groups.setdefault(self._find_idx(idx), []).append(element)
        return list(groups.values())

    def __contains__(self, element) -> bool:
        return element in self._index

    def __len__(self) -> int:
        return len(self._elements)
