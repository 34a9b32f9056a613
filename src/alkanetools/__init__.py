"""
alkanetools: enumerate alkane isomers CnH2n+2 as unlabeled trees with
maximum degree 4, with canonical tree keys and resumable per-size
checkpoints.
"""

from .trees.tree import MAX_VALENCE, Generation, Tree, single_node
from .trees.canonical import canonical_form, find_centers, rooted_encoding
from .trees.validate import InvalidTreeError, check_adjlist, is_valid_tree, validate_checkpoint_file
from .growth.expand import base_generation, expand_generation, expand_tree
from .growth.driver import GenerationResult, count_isomers, generate_isomer_count

# Checkpoints
from .io.checkpoint import (
    CheckpointError,
    CheckpointStore,
    DirectoryCheckpointStore,
    MemoryCheckpointStore,
)

# Interop and naming
from .io.graph6 import g6_to_tree, tree_to_g6, tree_to_nx, nx_to_tree
from .utils.naming import alkane_formula, tree_name

__all__ = [
    # Trees
    "MAX_VALENCE",
    "Generation",
    "Tree",
    "single_node",
    "canonical_form",
    "find_centers",
    "rooted_encoding",
    "InvalidTreeError",
    "check_adjlist",
    "is_valid_tree",
    "validate_checkpoint_file",
    # Growth
    "base_generation",
    "expand_generation",
    "expand_tree",
    "GenerationResult",
    "count_isomers",
    "generate_isomer_count",
    # Checkpoints
    "CheckpointError",
    "CheckpointStore",
    "DirectoryCheckpointStore",
    "MemoryCheckpointStore",
    # Interop
    "g6_to_tree",
    "tree_to_g6",
    "tree_to_nx",
    "nx_to_tree",
    # Naming
    "alkane_formula",
    "tree_name",
]
