from __future__ import annotations

from alkanetools.trees.tree import Tree

# Common names for the chains up to decane.
_CHAIN_NAMES = {
    1: "methane",
    2: "ethane",
    3: "propane",
    4: "butane",
    5: "pentane",
    6: "hexane",
    7: "heptane",
    8: "octane",
    9: "nonane",
    10: "decane",
}


def alkane_formula(n: int) -> str:
    """Molecular formula CnH2n+2, e.g. 'C4H10'.  Methane is 'CH4'."""
    if n < 1:
        raise ValueError(f"n must be >= 1, got {n}")
    c = "C" if n == 1 else f"C{n}"
    return f"{c}H{2 * n + 2}"


def tree_name(tree: Tree) -> str:
    """Human-readable name for a carbon skeleton.

    Handles: straight chains ('butane' up to decane, P{n} beyond),
    stars K1,{r} (r = 3 or 4; r <= 2 stars are chains) and the general
    T{n}[{deg_seq}] for everything else.
    """
    n = len(tree)
    if n == 0:
        return "empty"

    degs = sorted(tree.degrees(), reverse=True)
    max_d = degs[0]

    if max_d <= 2:
        return _CHAIN_NAMES.get(n, f"P{n}")

    # Star: one hub adjacent to every other node
    if max_d == n - 1:
        return f"K1,{n - 1}"

    ds_str = "".join(str(d) for d in degs)
    return f"T{n}[{ds_str}]"
