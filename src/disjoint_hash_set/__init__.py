"""Disjoint hash set library initialization."""

from .hashset import ConsumedError, DisjointHashSet
from .structures import DisjointSet
from .pipeline import EdgeGrouper, GroupingConfig, GroupingResult, GroupingStats
from .runner import group_file

__all__ = [
    "DisjointHashSet",
    "ConsumedError",
    "DisjointSet",
    "EdgeGrouper",
    "GroupingConfig",
    "GroupingResult",
    "GroupingStats",
    "group_file",
]
