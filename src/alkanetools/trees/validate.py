"""Structural checks for adjacency lists read from untrusted storage."""
from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from alkanetools.trees.tree import MAX_VALENCE


class InvalidTreeError(ValueError):
    """Adjacency data that is not a valid degree-bounded tree."""


def _is_int(x: Any) -> bool:
    return isinstance(x, int) and not isinstance(x, bool)


def check_adjlist(adj: Any, max_degree: int = MAX_VALENCE) -> None:
    """Raise InvalidTreeError unless *adj* is a tree with degrees <= max_degree.

    Checks, in order: list shape, neighbor indices in range, no self-loops
    or repeated neighbors, degree bound, mutual adjacency, connectivity
    and edge count n-1.
    """
    if not isinstance(adj, list):
        raise InvalidTreeError(f"expected a list of neighbor lists, got {type(adj).__name__}")
    n = len(adj)
    if n == 0:
        raise InvalidTreeError("tree has no nodes")

    for u, row in enumerate(adj):
        if not isinstance(row, list):
            raise InvalidTreeError(f"node {u}: neighbor list is {type(row).__name__}")
        if len(row) > max_degree:
            raise InvalidTreeError(f"node {u}: degree {len(row)} exceeds {max_degree}")
        for v in row:
            if not _is_int(v) or v < 0 or v >= n:
                raise InvalidTreeError(f"node {u}: neighbor {v!r} out of range 0..{n - 1}")
            if v == u:
                raise InvalidTreeError(f"node {u}: self-loop")
        if len(set(row)) != len(row):
            raise InvalidTreeError(f"node {u}: repeated neighbor")

    neighbor_sets = [set(row) for row in adj]
    for u in range(n):
        for v in neighbor_sets[u]:
            if u not in neighbor_sets[v]:
                raise InvalidTreeError(f"edge {u}-{v} is not mutual")

    visited = {0}
    stack = [0]
    while stack:
        node = stack.pop()
        for nbr in neighbor_sets[node]:
            if nbr not in visited:
                visited.add(nbr)
                stack.append(nbr)
    if len(visited) != n:
        raise InvalidTreeError(f"disconnected: reached {len(visited)} of {n} nodes")

    m = sum(len(row) for row in adj) // 2
    if m != n - 1:
        raise InvalidTreeError(f"{m} edges on {n} nodes (a tree has {n - 1})")


def is_valid_tree(adj: Any, max_degree: int = MAX_VALENCE) -> bool:
    try:
        check_adjlist(adj, max_degree=max_degree)
    except InvalidTreeError:
        return False
    return True


@dataclass(frozen=True)
class ValidationReport:
    """
    Outcome of re-checking one checkpoint file.

    ok:      every entry passed
    error:   first failure message, None when ok
    entries: number of entries that were read
    """

    ok: bool
    error: Optional[str]
    entries: int


def validate_checkpoint_file(path: str | Path) -> ValidationReport:
    """Re-check every tree in a checkpoint file; stop at the first bad entry."""
    try:
        raw = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        return ValidationReport(ok=False, error=f"unreadable: {e}", entries=0)
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        return ValidationReport(ok=False, error=f"invalid JSON: {e}", entries=0)
    if not isinstance(data, list):
        return ValidationReport(ok=False, error="expected top-level array", entries=0)
    if not data:
        return ValidationReport(ok=False, error="empty generation", entries=0)

    for i, adj in enumerate(data):
        try:
            check_adjlist(adj)
        except InvalidTreeError as e:
            return ValidationReport(ok=False, error=f"entry {i} is not a valid tree: {e}", entries=len(data))
    return ValidationReport(ok=True, error=None, entries=len(data))
