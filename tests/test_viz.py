"""Tests for alkanetools.viz pagination and drawing."""
import pytest

matplotlib = pytest.importorskip("matplotlib")
matplotlib.use("Agg")

from alkanetools.growth.driver import count_isomers, generate_isomer_count  # noqa: E402
from alkanetools.io.checkpoint import MemoryCheckpointStore  # noqa: E402
from alkanetools.io.graph6 import tree_to_nx  # noqa: E402
from alkanetools.viz.draw import draw_generation_page, page_count, page_slice, tree_layout  # noqa: E402


def test_page_count():
    assert page_count(0, 10) == 1
    assert page_count(10, 10) == 1
    assert page_count(11, 10) == 2


def test_page_count_rejects_zero():
    with pytest.raises(ValueError):
        page_count(5, 0)


def test_page_slice():
    items = list(range(7))
    assert page_slice(items, 0, 3) == [0, 1, 2]
    assert page_slice(items, 2, 3) == [6]
    with pytest.raises(IndexError):
        page_slice(items, 3, 3)


def test_tree_layout_chain_is_straight():
    gen = generate_isomer_count(4, MemoryCheckpointStore(), progress=False).generation
    for tree in gen.values():
        pos = tree_layout(tree_to_nx(tree))
        assert len(pos) == 4


def test_draw_generation_page(tmp_path):
    gen = generate_isomer_count(7, MemoryCheckpointStore(), progress=False).generation
    out = tmp_path / "heptanes.png"
    drawn = draw_generation_page(list(gen.values()), page=1, per_page=6, save_path=str(out))
    assert drawn == count_isomers(7) - 6
    assert out.exists()
