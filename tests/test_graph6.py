"""Tests for networkx / graph6 interop."""
import networkx as nx

from alkanetools.io.graph6 import (
    g6_to_tree,
    nx_to_tree,
    strip_graph6_header,
    tree_to_g6,
    tree_to_nx,
    write_generation_g6,
)
from alkanetools.growth.driver import generate_isomer_count
from alkanetools.io.checkpoint import MemoryCheckpointStore
from alkanetools.trees.canonical import canonical_form
from alkanetools.trees.tree import Tree


ISOPENTANE = Tree.from_adjlist([[1], [0, 2, 4], [1, 3], [2], [1]])


def test_strip_header():
    assert strip_graph6_header(">>graph6<<D?{\n") == "D?{"


def test_tree_to_nx():
    G = tree_to_nx(ISOPENTANE)
    assert G.number_of_nodes() == 5
    assert G.number_of_edges() == 4
    assert nx.is_tree(G)


def test_nx_to_tree_relabels():
    G = nx.Graph([("a", "b"), ("b", "c")])
    tree = nx_to_tree(G)
    assert tree.to_adjlist() == [[1], [0, 2], [1]]


def test_g6_preserves_isomorphism_class():
    tree = g6_to_tree(tree_to_g6(ISOPENTANE))
    assert canonical_form(tree) == canonical_form(ISOPENTANE)


def test_generation_trees_are_networkx_trees():
    gen = generate_isomer_count(7, MemoryCheckpointStore(), progress=False).generation
    graphs = [tree_to_nx(t) for t in gen.values()]
    for G in graphs:
        assert nx.is_tree(G)
        assert max(d for _, d in G.degree()) <= 4
    for i in range(len(graphs)):
        for j in range(i + 1, len(graphs)):
            assert not nx.is_isomorphic(graphs[i], graphs[j])


def test_write_generation_g6(tmp_path):
    gen = generate_isomer_count(6, MemoryCheckpointStore(), progress=False).generation
    path = tmp_path / "hexanes.g6"
    assert write_generation_g6(gen.values(), path) == 5
    lines = path.read_text().splitlines()
    keys = {canonical_form(g6_to_tree(line)) for line in lines}
    assert keys == set(gen)
