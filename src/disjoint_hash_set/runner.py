"""Convenience helpers for grouping an edge-list file end-to-end."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import pandas as pd

from .pipeline import EdgeGrouper, GroupingConfig, GroupingResult


def group_file(
    input_path: str | Path,
    output_path: str | Path,
    config: Optional[GroupingConfig] = None,
) -> GroupingResult | None:
    """Group the edges in `input_path` and write the key assignments to `output_path`."""

    input_path = Path(input_path)
    output_path = Path(output_path)

    try:
        dataframe = _load_dataframe(input_path)
    except FileNotFoundError:
        print(f"ERROR: Input file not found at '{input_path}'.")
        return None
    except pd.errors.EmptyDataError:
        print(f"ERROR: Input file '{input_path}' is empty. Expected a header row with the edge columns.")
        return None
    except ValueError:
        print(f"ERROR: Unsupported file format for '{input_path}'. Please provide a CSV or Excel file.")
        return None

    config = config or GroupingConfig()
    for column in (config.source_column, config.target_column):
        if column not in dataframe.columns:
            print(f"ERROR: Column '{column}' not found in '{input_path}'. Please check the edge column names.")
            return None

    grouper = EdgeGrouper(config)
    try:
        return grouper.group(dataframe, output_path)
    except ValueError as exc:
        print(f"ERROR: {exc}")
        return None


_EDGE_READERS = {
    ".csv": pd.read_csv,
    ".xls": pd.read_excel,
    ".xlsx": pd.read_excel,
}


def _load_dataframe(path: Path) -> pd.DataFrame:
    reader = _EDGE_READERS.get(path.suffix.lower())
    if reader is None:
        raise ValueError(f"unsupported edge file format: '{path.suffix}'")
    # keys are opaque: only truly empty cells count as missing, not "NA" or "null"
    return reader(path, dtype=str, keep_default_na=False, na_values=[""])
