from .expand import attachments, base_generation, expand_generation, expand_tree
from .driver import (
    GenerationResult,
    check_target_size,
    count_isomers,
    find_resume_point,
    generate_isomer_count,
)

__all__ = [
    "attachments",
    "base_generation",
    "expand_generation",
    "expand_tree",
    "GenerationResult",
    "check_target_size",
    "count_isomers",
    "find_resume_point",
    "generate_isomer_count",
]
