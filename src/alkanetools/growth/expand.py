"""Grow a generation of size-k trees into the size-(k+1) generation."""
from __future__ import annotations

from multiprocessing import Pool
from typing import Iterator, List, Tuple

from alkanetools.trees.canonical import canonical_form
from alkanetools.trees.tree import Generation, Tree, single_node


def base_generation() -> Generation:
    """Size-1 generation: methane."""
    tree = single_node()
    return {canonical_form(tree): tree}


def attachments(tree: Tree) -> List[int]:
    """Nodes that can still take another neighbor."""
    return [v for v in range(len(tree)) if tree.has_headroom(v)]


def expand_tree(tree: Tree) -> Iterator[Tuple[str, Tree]]:
    """Yield (canonical key, candidate) for every single-leaf extension of *tree*."""
    for v in attachments(tree):
        child = tree.with_leaf(v)
        yield canonical_form(child), child


def _expand_chunk(trees: List[Tree]) -> Generation:
    part: Generation = {}
    for tree in trees:
        for key, child in expand_tree(tree):
            if key not in part:
                part[key] = child
    return part


def _check_sizes(generation: Generation) -> int:
    sizes = {len(tree) for tree in generation.values()}
    if len(sizes) > 1:
        raise ValueError(f"generation mixes tree sizes {sorted(sizes)}")
    return sizes.pop() if sizes else 0


def expand_generation(
    generation: Generation,
    *,
    processes: int = 1,
    chunk_size: int = 256,
) -> Generation:
    """One representative per isomorphism class reachable by adding a leaf.

    Parameters
    ----------
    generation : dict[str, Tree]
        Deduplicated trees, all with the same node count k.
    processes : int
        Worker processes.  With more than one, source trees are split into
        chunks of *chunk_size*, expanded independently and the partial
        mappings merged by key.  The resulting key set does not depend on
        the number of processes.

    Returns
    -------
    dict[str, Tree]
        Fresh mapping canonical key -> tree with k+1 nodes.  When several
        candidates share a key the first one seen is kept.
    """
    _check_sizes(generation)
    trees = list(generation.values())

    if processes <= 1 or len(trees) <= chunk_size:
        return _expand_chunk(trees)

    chunks = [trees[i : i + chunk_size] for i in range(0, len(trees), chunk_size)]
    out: Generation = {}
    with Pool(processes=processes) as pool:
        for part in pool.imap_unordered(_expand_chunk, chunks, chunksize=1):
            for key, tree in part.items():
                if key not in out:
                    out[key] = tree
    return out
