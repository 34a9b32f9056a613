from __future__ import annotations

import math
from typing import Sequence

import matplotlib.pyplot as plt
import networkx as nx

from alkanetools.io.graph6 import tree_to_nx
from alkanetools.trees.tree import Tree
from alkanetools.utils.naming import tree_name


def page_count(total: int, per_page: int) -> int:
    """Number of pages needed for *total* trees, at least one."""
    if per_page < 1:
        raise ValueError(f"per_page must be >= 1, got {per_page}")
    return max(1, math.ceil(total / per_page))


def page_slice(trees: Sequence[Tree], page: int, per_page: int) -> Sequence[Tree]:
    """Trees shown on 0-based *page*.  Raises IndexError past the last page."""
    pages = page_count(len(trees), per_page)
    if page < 0 or page >= pages:
        raise IndexError(f"page {page} out of range 0..{pages - 1}")
    return trees[page * per_page : (page + 1) * per_page]


def tree_layout(G: nx.Graph, seed: int = 7):
    """
    Layout for a small tree: straight line for chains, spring layout otherwise.
    """
    n = G.number_of_nodes()
    if n <= 2 or max(d for _, d in G.degree()) <= 2:
        ends = [v for v, d in G.degree() if d <= 1]
        order = list(nx.dfs_preorder_nodes(G, source=ends[0]))
        return {v: (float(i), 0.0) for i, v in enumerate(order)}
    return nx.spring_layout(G, seed=seed, iterations=300)


def draw_generation_page(
    trees: Sequence[Tree],
    *,
    page: int = 0,
    per_page: int = 24,
    ncols: int = 6,
    seed: int = 7,
    node_size: int = 80,
    edge_width: float = 1.2,
    title: str | None = None,
    save_path: str | None = None,
) -> int:
    """
    Draw one page of trees in a grid, one subplot per tree.

    If save_path is set, saves a PNG there; otherwise shows the figure.
    Returns the number of trees drawn.
    """
    shown = page_slice(trees, page, per_page)
    pages = page_count(len(trees), per_page)

    ncols = max(1, min(ncols, len(shown)))
    nrows = max(1, math.ceil(len(shown) / ncols))
    fig, axes = plt.subplots(nrows, ncols, figsize=(2.2 * ncols, 2.2 * nrows), squeeze=False)

    for ax in axes.flat:
        ax.set_axis_off()

    for i, tree in enumerate(shown):
        ax = axes.flat[i]
        G = tree_to_nx(tree)
        nx.draw_networkx(
            G,
            pos=tree_layout(G, seed=seed),
            ax=ax,
            with_labels=False,
            node_size=node_size,
            width=edge_width,
        )
        ax.set_title(f"#{page * per_page + i + 1} {tree_name(tree)}", fontsize=8)

    head = title or "Trees"
    fig.suptitle(f"{head}   page {page + 1}/{pages}   ({len(trees)} total)")
    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=150)
        plt.close(fig)
    else:
        plt.show()

    return len(shown)
