"""Canonical string keys for unlabeled trees.

Two trees get the same key iff they are isomorphic.  The key is the
AHU-style bracket encoding of the tree rooted at its center, taking the
smaller encoding when the tree has two centers.
"""
from __future__ import annotations

from typing import Dict, List, Tuple

from alkanetools.trees.tree import Tree

EMPTY_KEY = ""
SINGLE_NODE_KEY = "()"


def find_centers(tree: Tree) -> List[int]:
    """Center node(s) by layer-synchronous leaf peeling.

    Returns [] for the empty tree, one node when the diameter is even and
    two adjacent nodes when it is odd.
    """
    n = len(tree)
    if n == 0:
        return []
    if n == 1:
        return [0]

    degree = tree.degrees()
    leaves = [v for v in range(n) if degree[v] <= 1]
    removed = len(leaves)

    while removed < n:
        next_leaves: List[int] = []
        for leaf in leaves:
            for nbr in tree.adj[leaf]:
                degree[nbr] -= 1
                if degree[nbr] == 1:
                    next_leaves.append(nbr)
        if not next_leaves:
            break
        removed += len(next_leaves)
        leaves = next_leaves

    return sorted(set(leaves))


def rooted_encoding(tree: Tree, root: int, parent: int = -1) -> str:
    """Bracket encoding of the subtree hanging from *root*.

    Each node encodes to "(" + sorted child encodings + ")"; a leaf is "()".
    Uses an explicit stack so long chains do not hit the recursion limit.
    """
    order: List[Tuple[int, int]] = []
    stack = [(root, parent)]
    while stack:
        v, p = stack.pop()
        order.append((v, p))
        for nbr in tree.adj[v]:
            if nbr != p:
                stack.append((nbr, v))

    # children always appear after their parent in `order`
    children: Dict[int, List[str]] = {}
    enc = ""
    for v, p in reversed(order):
        labels = children.pop(v, [])
        labels.sort()
        enc = "(" + "".join(labels) + ")"
        children.setdefault(p, []).append(enc)
    return enc


def canonical_form(tree: Tree) -> str:
    """Relabeling-invariant key: min rooted encoding over the centers."""
    n = len(tree)
    if n == 0:
        return EMPTY_KEY
    if n == 1:
        return SINGLE_NODE_KEY
    return min(rooted_encoding(tree, c) for c in find_centers(tree))
