"""
HTML rendering for grids, task pages and the index page.
"""

from .grid import RenderedGrid, render_grid, size_label
from .html import (
    INDEX_FILENAME,
    render_example,
    render_index_page,
    render_task_page,
    render_task_tile,
    task_page_filename,
)
from .palette import PALETTE, PaletteColor, color_class
from .style import CELL_SIZE, STYLE_BLOCK

__all__ = [
    "RenderedGrid",
    "render_grid",
    "size_label",
    "INDEX_FILENAME",
    "render_example",
    "render_index_page",
    "render_task_page",
    "render_task_tile",
    "task_page_filename",
    "PALETTE",
    "PaletteColor",
    "color_class",
    "CELL_SIZE",
    "STYLE_BLOCK",
]
