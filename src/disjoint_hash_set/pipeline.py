"""Edge-list grouping pipeline built on :class:`DisjointHashSet`."""

from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Hashable, Iterable, List, Set, Tuple

import pandas as pd

try:
    from tqdm import tqdm

    _TQDM_AVAILABLE = True
except ImportError:  # pragma: no cover - optional dependency
    _TQDM_AVAILABLE = False

from .hashset import DisjointHashSet


@dataclass
class GroupingStats:
    """Summary metrics for a grouping run."""

    total_edges: int
    total_keys: int
    self_links: int
    group_count: int
    largest_group: int
    runtime_seconds: float


@dataclass
class GroupingResult:
    """Result bundle returned by :class:`EdgeGrouper`."""

    dataframe: pd.DataFrame
    groups: List[Set[Hashable]]
    stats: GroupingStats


@dataclass
class GroupingConfig:
    """Configuration parameters for :class:`EdgeGrouper`."""

    source_column: str = "source"
    target_column: str = "target"
    key_column: str = "key"
    group_column: str = "group_id"
    use_tqdm: bool | None = None
    verbose: bool = True


class EdgeGrouper:
    """Partition the endpoints of an edge list into connected groups."""

    def __init__(self, config: GroupingConfig | None = None) -> None:
        self.config = config or GroupingConfig()

    def group(
        self,
        dataframe: pd.DataFrame,
        output_path: str | Path | None = None,
    ) -> GroupingResult:
        """Link every row's endpoints, optionally save the assignments, and return them."""

        for column in (self.config.source_column, self.config.target_column):
            if column not in dataframe.columns:
                raise KeyError(f"Column '{column}' not found in dataframe")

        verbose = self.config.verbose
        overall_start_time = time.time()
        if verbose:
            print("--- Edge Grouping Started ---")
            print("\n1. Reading edges...")

        t0 = time.time()
        edges = list(
            zip(
                dataframe[self.config.source_column].tolist(),
                dataframe[self.config.target_column].tolist(),
            )
        )
        if verbose:
            print(f"   Loaded {len(edges)} edges. Done in {time.time() - t0:.2f}s")

        t0 = time.time()
        if verbose:
            print("2. Linking endpoints...")
        djhs: DisjointHashSet[Hashable] = DisjointHashSet()
        first_seen: Dict[Hashable, int] = {}
        self_links = 0

        iterator: Iterable[Tuple[object, object]] = edges
        if edges and self._use_tqdm:
            iterator = tqdm(edges, desc="   Linking Edges", unit="edge")

        for source, target in iterator:
            present = [value for value in (source, target) if not _is_missing(value)]
            for value in present:
                first_seen.setdefault(value, len(first_seen))
            if len(present) == 2:
                if present[0] == present[1]:
                    self_links += 1
                djhs.link(present[0], present[1])
            elif present:
                djhs.insert(present[0])
        if verbose:
            print(f"   Registered {len(djhs)} distinct keys. Done in {time.time() - t0:.2f}s")

        t0 = time.time()
        if verbose:
            print("3. Extracting groups...")
        groups = self._order_groups(djhs.sets(), first_seen)
        df = self._build_assignments(groups, first_seen)
        if verbose:
            print(f"   Found {len(groups)} groups. Done in {time.time() - t0:.2f}s")

        if verbose:
            print("\n--- Results Summary ---")
            print(f"   - Total edges processed: {len(edges)}")
            print(f"   - Distinct keys: {len(first_seen)}")
            print(f"   - Groups found: {len(groups)}")
            print("\n   --- Sample of Largest Groups Found ---")
            for idx, members in enumerate(groups[:10]):
                if len(members) <= 1:
                    break
                ordered = sorted(members, key=first_seen.__getitem__)
                print(f"   Group {idx} (Size: {len(members)})")
                for value in ordered[:5]:
                    print(f"     - {value}")
                if len(members) > 5:
                    print("     - ...")

        if output_path is not None:
            output_str = str(output_path)
            self._save_dataframe(df, output_str)
            if verbose:
                print(f"\n   Processing complete. Results saved to '{output_str}'")

        elapsed = time.time() - overall_start_time
        summary = GroupingStats(
            total_edges=len(edges),
            total_keys=len(first_seen),
            self_links=self_links,
            group_count=len(groups),
            largest_group=len(groups[0]) if groups else 0,
            runtime_seconds=elapsed,
        )

        if verbose:
            print(f"\n--- Edge Grouping Finished in {elapsed:.2f} seconds ---")

        return GroupingResult(dataframe=df, groups=groups, stats=summary)

    @property
    def _use_tqdm(self) -> bool:
        if self.config.use_tqdm is not None:
            return self.config.use_tqdm and _TQDM_AVAILABLE
        return _TQDM_AVAILABLE

    @staticmethod
    def _order_groups(groups: List[Set[Hashable]], first_seen: Dict[Hashable, int]) -> List[Set[Hashable]]:
        # largest first, then by the earliest-seen member
        return sorted(groups, key=lambda members: (-len(members), min(first_seen[v] for v in members)))

    def _build_assignments(
        self,
        groups: List[Set[Hashable]],
        first_seen: Dict[Hashable, int],
    ) -> pd.DataFrame:
        rows = []
        for group_id, members in enumerate(groups):
            for value in sorted(members, key=first_seen.__getitem__):
                rows.append(
                    {
                        self.config.key_column: value,
                        self.config.group_column: group_id,
                        "group_size": len(members),
                    }
                )
        columns = [self.config.key_column, self.config.group_column, "group_size"]
        return pd.DataFrame(rows, columns=columns)

    @staticmethod
    def _save_dataframe(dataframe: pd.DataFrame, output_path: str | Path) -> None:
        path = Path(output_path)
        suffix = path.suffix.lower()
        if suffix == ".csv":
            dataframe.to_csv(path, index=False)
            return
        if suffix in {".xls", ".xlsx"}:
            dataframe.to_excel(path, index=False)
            return
        raise ValueError(f"Unsupported output file format: '{suffix}'")


def _is_missing(value: object) -> bool:
    return pd.api.types.is_scalar(value) and bool(pd.isna(value))


__all__ = [
    "EdgeGrouper",
    "GroupingConfig",
    "GroupingResult",
    "GroupingStats",
]
