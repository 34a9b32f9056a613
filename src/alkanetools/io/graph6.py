from __future__ import annotations

from pathlib import Path
from typing import Iterable

import networkx as nx

from alkanetools.trees.tree import Tree


def strip_graph6_header(g6: str) -> str:
    """
    Remove optional '>>graph6<<' header and whitespace.
    """
    s = g6.strip()
    if s.startswith(">>graph6<<"):
        s = s[len(">>graph6<<") :].strip()
    return s


def tree_to_nx(tree: Tree) -> nx.Graph:
    """
    Build an undirected NetworkX Graph on nodes 0..n-1.
    """
    G = nx.Graph()
    G.add_nodes_from(range(len(tree)))
    G.add_edges_from(tree.edges())
    return G


def nx_to_tree(G: nx.Graph) -> Tree:
    """
    Convert a NetworkX graph to a Tree, relabeling nodes to 0..n-1
    in sorted order.  Does not check tree-ness.
    """
    nodes = sorted(G.nodes())
    index = {v: i for i, v in enumerate(nodes)}
    return Tree(tuple(frozenset(index[u] for u in G.neighbors(v)) for v in nodes))


def tree_to_g6(tree: Tree) -> str:
    return nx.to_graph6_bytes(tree_to_nx(tree), header=False).decode("ascii").strip()


def g6_to_tree(g6: str) -> Tree:
    """
    Parse a graph6 string into a Tree.
    """
    s = strip_graph6_header(g6)
    G = nx.from_graph6_bytes(s.encode("ascii"))
    return nx_to_tree(G)


def write_generation_g6(trees: Iterable[Tree], path: str | Path) -> int:
    """
    Write one graph6 line per tree.  Returns the number of lines written.
    """
    count = 0
    with open(path, "w", encoding="ascii") as f:
        for tree in trees:
            f.write(tree_to_g6(tree) + "\n")
            count += 1
    return count
