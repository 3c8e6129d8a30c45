"""Command line entry point for grouping an edge-list file."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .pipeline import GroupingConfig
from .runner import group_file


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Partition the endpoints of an edge list into connected groups.")
    parser.add_argument("input", type=Path, help="Path to the input CSV or Excel edge list")
    parser.add_argument("output", type=Path, help="Path where the key/group assignments will be written")
    parser.add_argument("--source-column", default="source", help="Column holding the first endpoint (default: source)")
    parser.add_argument("--target-column", default="target", help="Column holding the second endpoint (default: target)")
    parser.add_argument(
        "--disable-tqdm",
        action="store_true",
        help="Disable progress bars even if tqdm is installed",
    )
    parser.add_argument("--quiet", action="store_true", help="Suppress step-by-step progress output")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)

    config = GroupingConfig(
        source_column=args.source_column,
        target_column=args.target_column,
        use_tqdm=not args.disable_tqdm,
        verbose=not args.quiet,
    )

    result = group_file(args.input, args.output, config)
    return 0 if result is not None else 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
