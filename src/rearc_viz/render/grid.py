"""
Convert a single grid into HTML cell markup.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import StructuralGridError
from ..tasks.models import Grid, grid_shape
from .palette import color_class
from .style import CELL_SIZE


@dataclass(frozen=True)
class RenderedGrid:
    markup: str
    size_label: str


def size_label(grid: Grid) -> str:
    """Return the `rows×cols` label for a grid."""
    rows, cols = grid_shape(grid)
    return f"{rows}×{cols}"


def render_grid(grid: Grid) -> RenderedGrid:
    """
    Render a grid as a CSS grid of fixed-size colored cells.

    Raises:
        StructuralGridError: If the grid is empty, ragged, or holds a value outside the palette.
    """
    rows, cols = grid_shape(grid)
    cells = []
    for row_index, row in enumerate(grid):
        for col_index, value in enumerate(row):
            try:
                css_class = color_class(value)
            except ValueError as exc:
                raise StructuralGridError(f"row {row_index} col {col_index}: {exc}") from exc
            cells.append(f'<div class="cell {css_class}"></div>')

    markup = (
        f'<div class="grid" style="grid-template-columns: repeat({cols}, {CELL_SIZE}px);">'
        f'{"".join(cells)}</div>'
    )
    return RenderedGrid(markup=markup, size_label=f"{rows}×{cols}")
