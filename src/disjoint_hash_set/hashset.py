"""Union-find keyed by arbitrary hashable values."""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, Generic, Hashable, Iterable, List, Optional, Set, Tuple, TypeVar

from .structures import DisjointSet

K = TypeVar("K", bound=Hashable)


class ConsumedError(RuntimeError):
    """Raised when a :class:`DisjointHashSet` is used after :meth:`~DisjointHashSet.sets`."""


class DisjointHashSet(Generic[K]):
    """A disjoint set for incrementally tracking connected components identified by their hash.

    The total number of components does not need to be known in advance.
    Values and the links between them are added as they are discovered; each
    distinct value gets a dense integer id on first sight and the union-find
    work happens on those ids.

    >>> djhs = DisjointHashSet()
    >>> djhs.link("hello", "hi")
    >>> djhs.link("hello", "👋")
    >>> djhs.is_linked("hi", "👋")
    True
    >>> len(DisjointHashSet([("a", "b"), ("a", "c"), ("d", "e"), ("f", "f")]).sets())
    3
    """

    def __init__(self, edges: Iterable[Tuple[K, K]] | None = None) -> None:
        self._ids: Dict[K, int] = {}
        self._forest = DisjointSet()
        self._consumed = False
        if edges is not None:
            for left, right in edges:
                self.link(left, right)

    @classmethod
    def from_edges(cls, edges: Iterable[Tuple[K, K]]) -> "DisjointHashSet[K]":
        """Build a structure by linking every `(a, b)` pair in order."""

        return cls(edges)

    def __len__(self) -> int:
        self._check_alive()
        return len(self._ids)

    def __contains__(self, value: object) -> bool:
        return self.contains(value)  # type: ignore[arg-type]

    def __repr__(self) -> str:
        if self._consumed:
            return f"{type(self).__name__}(<consumed>)"
        roots = {self._forest.find(index) for index in self._ids.values()}
        return f"{type(self).__name__}(keys={len(self._ids)}, groups={len(roots)})"

    def contains(self, value: K) -> bool:
        """Return True if `value` has already been inserted."""

        return self.lookup(value) is not None

    def insert(self, value: K) -> bool:
        """Insert `value` as a new single-member set. Returns True if it was not already present."""

        if self.contains(value):
            return False
        self._register(value)
        return True

    def is_linked(self, left: K, right: K) -> bool:
        """Return True if both values are present and members of the same set.

        Values that were never inserted are not added.
        """

        left_id = self.lookup(left)
        right_id = self.lookup(right)
        if left_id is None or right_id is None:
            return False
        return self._forest.find(left_id) == self._forest.find(right_id)

    def link(self, left: K, right: K) -> None:
        """Join the sets of `left` and `right`, inserting either value if needed."""

        left_id = self.lookup_or_register(left)
        right_id = self.lookup_or_register(right)
        self._forest.union(left_id, right_id)

    def sets(self) -> List[Set[K]]:
        """Consume the structure and return one set per disjoint group.

        Neither the groups nor their members come in any particular order.
        """

        self._check_alive()
        forest = self._forest
        groups: Dict[int, Set[K]] = defaultdict(set)
        for value, index in self._ids.items():
            groups[forest.find(index)].add(value)

        self._ids = {}
        self._forest = DisjointSet()
        self._consumed = True
        return list(groups.values())

    def lookup(self, value: K) -> Optional[int]:
        """Return the internal id of `value`, or None if it was never inserted."""

        self._check_alive()
        return self._ids.get(value)

    def lookup_or_register(self, value: K) -> int:
        index = self.lookup(value)
        if index is None:
            index = self._register(value)
        return index

    def _register(self, value: K) -> int:
        index = self._forest.add()
        self._ids[value] = index
        return index

    def _check_alive(self) -> None:
        if self._consumed:
            raise ConsumedError("DisjointHashSet was consumed by sets() and can no longer be used")


__all__ = ["ConsumedError", "DisjointHashSet"]
