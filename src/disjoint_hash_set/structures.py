"""Basic data structures."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List


@dataclass(eq=False)
class DisjointSet:
    """Union-find forest over dense integer ids.

    Uses union by rank and path compression. Records can be appended with
    :meth:`add`, so the forest grows alongside whatever registry hands out ids.
    """

    size: int = 0

    def __post_init__(self) -> None:
        if self.size < 0:
            raise ValueError("size must be non-negative")
        self.parent: List[int] = list(range(self.size))
        self._rank: List[int] = [0] * self.size

    def __len__(self) -> int:
        return len(self.parent)

    def add(self) -> int:
        """Append a new singleton root and return its id."""

        index = len(self.parent)
        self.parent.append(index)
        self._rank.append(0)
        self.size = len(self.parent)
        return index

    def rank(self, index: int) -> int:
        return self._rank[index]

    def find(self, index: int) -> int:
        parent = self.parent
        root = index
        while parent[root] != root:
            root = parent[root]
        # second pass: point every node on the path at the root
        while parent[index] != root:
            next_index = parent[index]
            parent[index] = root
            index = next_index
        return root

    def union(self, left: int, right: int) -> int:
        """Merge the sets containing `left` and `right` and return the surviving root.

        The lower-rank root is attached under the higher-rank one. On equal
        ranks the root of `right` survives and its rank grows by one.
        """

        root_left = self.find(left)
        root_right = self.find(right)
        if root_left == root_right:
            return root_left
        rank_left = self._rank[root_left]
        rank_right = self._rank[root_right]
        if rank_left > rank_right:
            self.parent[root_right] = root_left
            return root_left
        self.parent[root_left] = root_right
        if rank_left == rank_right:
            self._rank[root_right] = rank_right + 1
        return root_right
