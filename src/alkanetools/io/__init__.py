from .checkpoint import (
    ALKANES_DATA_DIR,
    CheckpointError,
    CheckpointStore,
    DirectoryCheckpointStore,
    Generation,
    MemoryCheckpointStore,
    adjlists_to_generation,
    default_data_dir,
    generation_to_adjlists,
)
from .graph6 import g6_to_tree, nx_to_tree, tree_to_g6, tree_to_nx, write_generation_g6

__all__ = [
    "ALKANES_DATA_DIR",
    "CheckpointError",
    "CheckpointStore",
    "DirectoryCheckpointStore",
    "Generation",
    "MemoryCheckpointStore",
    "adjlists_to_generation",
    "default_data_dir",
    "generation_to_adjlists",
    "g6_to_tree",
    "nx_to_tree",
    "tree_to_g6",
    "tree_to_nx",
    "write_generation_g6",
]
