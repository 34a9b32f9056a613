"""Per-size snapshots of a generation, so long runs can stop and resume.

A checkpoint for size k is a JSON array of adjacency lists, one per tree:

    [[[1], [0]]]                       # size 2: ethane
    [[[1], [0, 2], [1]]]               # size 3: propane

Missing checkpoints load as None.  Anything present but malformed raises
CheckpointError instead of being treated as missing.
"""
from __future__ import annotations

import json
import os
import re
import tempfile
from pathlib import Path
from typing import Dict, List, Optional, Protocol

from alkanetools.trees.canonical import canonical_form
from alkanetools.trees.tree import Generation, Tree
from alkanetools.trees.validate import InvalidTreeError, check_adjlist

AdjList = List[List[int]]

ALKANES_DATA_DIR = os.environ.get("ALKANES_DATA_DIR", "data")

_FILENAME_RE = re.compile(r"^size_(\d+)\.json$")


class CheckpointError(RuntimeError):
    """A checkpoint exists but cannot be trusted."""


class CheckpointStore(Protocol):
    def load(self, size: int) -> Optional[Generation]:
        ...

    def save(self, size: int, generation: Generation) -> None:
        ...


def default_data_dir() -> Path:
    return Path(ALKANES_DATA_DIR)


def generation_to_adjlists(generation: Generation) -> List[AdjList]:
    return [tree.to_adjlist() for tree in generation.values()]


def adjlists_to_generation(data: object, size: int, source: str = "checkpoint") -> Generation:
    """Validate raw checkpoint data and re-key it by canonical form.

    Raises CheckpointError for a wrong top-level shape, an empty list, an
    invalid tree, a tree with the wrong node count, or two isomorphic entries.
    """
    if not isinstance(data, list):
        raise CheckpointError(f"{source}: expected top-level array, got {type(data).__name__}")
    if not data:
        raise CheckpointError(f"{source}: empty generation")

    generation: Generation = {}
    for i, adj in enumerate(data):
        try:
            check_adjlist(adj)
        except InvalidTreeError as e:
            raise CheckpointError(f"{source}: entry {i} is not a valid tree: {e}") from e
        if len(adj) != size:
            raise CheckpointError(f"{source}: entry {i} has {len(adj)} nodes, expected {size}")
        tree = Tree.from_adjlist(adj)
        key = canonical_form(tree)
        if key in generation:
            raise CheckpointError(f"{source}: entry {i} duplicates an earlier isomer")
        generation[key] = tree
    return generation


class MemoryCheckpointStore:
    """In-process store.  Keeps plain adjacency-list copies, like the disk format."""

    def __init__(self) -> None:
        self._data: Dict[int, List[AdjList]] = {}

    def load(self, size: int) -> Optional[Generation]:
        if size not in self._data:
            return None
        return adjlists_to_generation(self._data[size], size, source=f"memory[size={size}]")

    def save(self, size: int, generation: Generation) -> None:
        self._data[size] = generation_to_adjlists(generation)

    def sizes(self) -> List[int]:
        return sorted(self._data)


class DirectoryCheckpointStore:
    """One size_{k}.json file per size under *root*.

    save() writes a temp file in the same directory, fsyncs it and then
    os.replace()s it into place, so readers see either the old file or the
    complete new one.
    """

    def __init__(self, root: str | Path | None = None) -> None:
        self.root = Path(root) if root is not None else default_data_dir()

    def path_for(self, size: int) -> Path:
        return self.root / f"size_{size}.json"

    def sizes(self) -> List[int]:
        if not self.root.is_dir():
            return []
        out = []
        for p in self.root.iterdir():
            m = _FILENAME_RE.match(p.name)
            if m:
                out.append(int(m.group(1)))
        return sorted(out)

    def load(self, size: int) -> Optional[Generation]:
        path = self.path_for(size)
        if not path.exists():
            return None
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise CheckpointError(f"{path}: unreadable checkpoint: {e}") from e
        return adjlists_to_generation(data, size, source=str(path))

    def save(self, size: int, generation: Generation) -> None:
        self.root.mkdir(parents=True, exist_ok=True)
        path = self.path_for(size)
        fd, tmp = tempfile.mkstemp(prefix=f".size_{size}.", suffix=".tmp", dir=self.root)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(generation_to_adjlists(generation), f, separators=(",", ":"))
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp, path)
        except BaseException:
            if os.path.exists(tmp):
                os.unlink(tmp)
            raise
