from .draw import draw_generation_page, page_count, page_slice, tree_layout

__all__ = [
    "draw_generation_page",
    "page_count",
    "page_slice",
    "tree_layout",
]
