from .naming import alkane_formula, tree_name

__all__ = [
    "alkane_formula",
    "tree_name",
]
