from .tree import MAX_VALENCE, Generation, Tree, single_node
from .canonical import EMPTY_KEY, SINGLE_NODE_KEY, canonical_form, find_centers, rooted_encoding
from .validate import (
    InvalidTreeError,
    ValidationReport,
    check_adjlist,
    is_valid_tree,
    validate_checkpoint_file,
)

__all__ = [
    "MAX_VALENCE",
    "Generation",
    "Tree",
    "single_node",
    "EMPTY_KEY",
    "SINGLE_NODE_KEY",
    "canonical_form",
    "find_centers",
    "rooted_encoding",
    "InvalidTreeError",
    "ValidationReport",
    "check_adjlist",
    "is_valid_tree",
    "validate_checkpoint_file",
]
