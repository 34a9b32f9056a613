"""Immutable adjacency-set representation of a carbon skeleton."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Sequence, Tuple

# Carbon valence: no node may have more than four neighbors.
MAX_VALENCE = 4


@dataclass(frozen=True)
class Tree:
    """
    Unlabeled-tree candidate stored as one neighbor set per node.

    adj[i] is the frozenset of indices adjacent to node i.  Nodes carry
    no attributes beyond their index.  Instances are never mutated;
    growth always goes through with_leaf().
    """

    adj: Tuple[FrozenSet[int], ...]

    @classmethod
    def from_adjlist(cls, adj: Sequence[Sequence[int]]) -> "Tree":
        return cls(tuple(frozenset(neigh) for neigh in adj))

    def to_adjlist(self) -> List[List[int]]:
        """Plain sorted neighbor lists, as written to checkpoints."""
        return [sorted(neigh) for neigh in self.adj]

    @property
    def n(self) -> int:
        return len(self.adj)

    def __len__(self) -> int:
        return len(self.adj)

    def degree(self, v: int) -> int:
        return len(self.adj[v])

    def degrees(self) -> List[int]:
        return [len(neigh) for neigh in self.adj]

    def has_headroom(self, v: int) -> bool:
        return len(self.adj[v]) < MAX_VALENCE

    def edges(self) -> List[Tuple[int, int]]:
        """
        Return undirected edges as (u,v) with u < v.
        """
        eds: List[Tuple[int, int]] = []
        for u, neigh in enumerate(self.adj):
            for v in sorted(neigh):
                if v > u:
                    eds.append((u, v))
        return eds

    def with_leaf(self, v: int) -> "Tree":
        """New tree with node n attached to v.  self is left untouched."""
        k = len(self.adj)
        adj = list(self.adj)
        adj[v] = adj[v] | {k}
        adj.append(frozenset({v}))
        return Tree(tuple(adj))


def single_node() -> Tree:
    """Methane: one node, no neighbors."""
    return Tree((frozenset(),))


# canonical key -> representative tree, all of one size
Generation = Dict[str, Tree]
