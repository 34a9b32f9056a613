"""
Command-line entry points.

  alkanes 10                       # count isomers of C10H22, resuming from data/
  alkanes 12 --data-dir runs/ --processes 4
  alkanes-validate data/size_9.json
  alkanes-draw 6 --page 0 --save hexanes.png
"""
from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import List, Optional

from alkanetools.growth.driver import check_target_size, generate_isomer_count
from alkanetools.io.checkpoint import CheckpointError, DirectoryCheckpointStore, default_data_dir
from alkanetools.trees.validate import validate_checkpoint_file
from alkanetools.utils.naming import alkane_formula


def _positive_int(text: str) -> int:
    try:
        return check_target_size(int(text))
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid n {text!r}: {e}") from e


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(
        prog="alkanes",
        description="Count structural isomers of CnH2n+2 (trees with max degree 4).",
    )
    ap.add_argument("n", type=_positive_int, help="number of carbon atoms (>= 1)")
    ap.add_argument("--data-dir", type=Path, default=None,
                    help="checkpoint directory (default: $ALKANES_DATA_DIR or ./data)")
    ap.add_argument("--no-resume", action="store_true", help="ignore existing checkpoints")
    ap.add_argument("--processes", type=int, default=1, help="worker processes per size")
    args = ap.parse_args(argv)

    store = DirectoryCheckpointStore(args.data_dir or default_data_dir())

    t0 = time.time()
    try:
        result = generate_isomer_count(
            args.n, store, resume=not args.no_resume, processes=args.processes
        )
    except CheckpointError as e:
        print(f"error: {e}", file=sys.stderr)
        return 3
    elapsed = time.time() - t0

    print(f"Generation: {elapsed:.3f}s", file=sys.stderr)
    print(f"Structural isomers of {alkane_formula(args.n)}: {result.count}")
    return 0


def main_validate(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(
        prog="alkanes-validate",
        description="Re-check that every entry of each checkpoint is a valid tree.",
    )
    ap.add_argument("paths", nargs="*", type=Path,
                    help="checkpoint files (default: every size_*.json in the data dir)")
    ap.add_argument("--data-dir", type=Path, default=None)
    args = ap.parse_args(argv)

    targets: List[Path] = list(args.paths)
    if not targets:
        store = DirectoryCheckpointStore(args.data_dir or default_data_dir())
        if not store.root.is_dir():
            print(f"No data directory found at {store.root}", file=sys.stderr)
            return 1
        targets = [store.path_for(k) for k in store.sizes()]

    failed = False
    for p in targets:
        if not p.exists():
            print(f"Skipped (not found): {p}", file=sys.stderr)
            failed = True
            continue
        report = validate_checkpoint_file(p)
        if report.ok:
            print(f"OK: {p} ({report.entries} trees)")
        else:
            print(f"INVALID: {p} -> {report.error}", file=sys.stderr)
            failed = True

    return 2 if failed else 0


def main_draw(argv: Optional[List[str]] = None) -> int:
    from alkanetools.viz.draw import draw_generation_page, page_count

    ap = argparse.ArgumentParser(
        prog="alkanes-draw",
        description="Draw one page of a saved generation.",
    )
    ap.add_argument("n", type=_positive_int, help="generation size to load")
    ap.add_argument("--data-dir", type=Path, default=None)
    ap.add_argument("--page", type=int, default=0, help="0-based page index")
    ap.add_argument("--per-page", type=int, default=24)
    ap.add_argument("--ncols", type=int, default=6)
    ap.add_argument("--save", type=str, default=None, help="write PNG here instead of showing")
    args = ap.parse_args(argv)

    store = DirectoryCheckpointStore(args.data_dir or default_data_dir())
    try:
        generation = store.load(args.n)
    except CheckpointError as e:
        print(f"error: {e}", file=sys.stderr)
        return 3
    if generation is None:
        print(f"No checkpoint for size {args.n} in {store.root}", file=sys.stderr)
        return 1

    trees = list(generation.values())
    try:
        drawn = draw_generation_page(
            trees,
            page=args.page,
            per_page=args.per_page,
            ncols=args.ncols,
            title=alkane_formula(args.n),
            save_path=args.save,
        )
    except (IndexError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    pages = page_count(len(trees), args.per_page)
    print(f"Drew {drawn} of {len(trees)} trees (page {args.page + 1}/{pages})")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
