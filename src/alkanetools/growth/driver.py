"""Size-by-size generation loop with checkpointed resume."""
from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Optional, Tuple

from alkanetools.growth.expand import base_generation, expand_generation
from alkanetools.io.checkpoint import CheckpointStore
from alkanetools.trees.tree import Generation


@dataclass(frozen=True)
class GenerationResult:
    """
    Outcome of a run up to size n.

    count:        number of isomers of CnH2n+2
    generation:   the size-n generation itself
    resumed_from: checkpoint size the run started from, None if from scratch
    """

    n: int
    count: int
    generation: Generation
    resumed_from: Optional[int]


def check_target_size(n: object) -> int:
    """Reject anything but a positive int (bools included)."""
    if not isinstance(n, int) or isinstance(n, bool):
        raise ValueError(f"n must be an integer, got {n!r}")
    if n < 1:
        raise ValueError(f"n must be >= 1, got {n}")
    return n


def find_resume_point(store: CheckpointStore, n: int) -> Optional[Tuple[int, Generation]]:
    """Largest size below n with a checkpoint in *store*, or None.

    Absent sizes are skipped.  A corrupt checkpoint raises CheckpointError.
    """
    for size in range(n - 1, 0, -1):
        loaded = store.load(size)
        if loaded is not None:
            return size, loaded
    return None


def generate_isomer_count(
    n: int,
    store: CheckpointStore,
    *,
    resume: bool = True,
    processes: int = 1,
    progress: bool = True,
) -> GenerationResult:
    """Grow generations from the best available start up to size n.

    Every completed generation is saved to *store* before the next size is
    started, so an interrupted run resumes from the last finished size.
    """
    check_target_size(n)

    found = find_resume_point(store, n) if resume else None
    if found is not None:
        start, current = found
        if progress:
            print(f"Resuming from size {start} with {len(current)} trees", file=sys.stderr)
    else:
        start, current = 1, base_generation()
        store.save(1, current)
        if progress:
            print("Starting from size 1", file=sys.stderr)

    for size in range(start, n):
        current = expand_generation(current, processes=processes)
        store.save(size + 1, current)
        if progress:
            print(f"[size={size + 1}] {len(current)} unique trees", file=sys.stderr)

    return GenerationResult(
        n=n,
        count=len(current),
        generation=current,
        resumed_from=start if found is not None else None,
    )


def count_isomers(n: int, *, processes: int = 1) -> int:
    """Isomer count for CnH2n+2 without checkpoints.  Only the current size is kept."""
    check_target_size(n)
    current = base_generation()
    for _ in range(1, n):
        current = expand_generation(current, processes=processes)
    return len(current)
