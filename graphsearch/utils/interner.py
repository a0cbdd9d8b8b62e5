from typing import Dict, List


class Interner:
    """
    Maps string labels to small consecutive integers, so that graphs over labelled
    nodes can use cheap-to-hash ints as their node type. The first label interned
    is 0, the next new label 1, and so on.
    """

    def __init__(self):
        self._ids: Dict[str, int] = {}
        self._labels: List[str] = []

    def intern(self, label: str) -> int:
        """
        Return the id of ``label``, assigning a new one if it has not been seen.
        """
        if label not in self._ids:
            self._ids[label] = len(self._labels)
            self._labels.append(label)
        return self._ids[label]

    def id_of(self, label: str) -> int:
        """
        Return the id of an already-interned label.

        :raises KeyError: If ``label`` was never interned.
        """
        return self._ids[label]

    def label(self, node_id: int) -> str:
        """
        Return the label that was interned as ``node_id``.
        """
        assert 0 <= node_id < len(self._labels), node_id
        return self._labels[node_id]

    def __contains__(self, label) -> bool:
        return label in self._ids

    def __len__(self) -> int:
        return len(self._labels)
