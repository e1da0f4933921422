"""
Fixed color palette for grid cells.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class PaletteColor:
    index: int
    name: str
    hex: str

    @property
    def css_class(self) -> str:
        return f"color-{self.index}"


# Colors of the ARC Prize web player.
PALETTE: Tuple[PaletteColor, ...] = (
    PaletteColor(0, "black", "#000000"),
    PaletteColor(1, "blue", "#1E93FF"),
    PaletteColor(2, "red", "#F93C31"),
    PaletteColor(3, "green", "#4FCC30"),
    PaletteColor(4, "yellow", "#FFDC00"),
    PaletteColor(5, "light-gray", "#999999"),
    PaletteColor(6, "magenta", "#E53AA3"),
    PaletteColor(7, "orange", "#FF851B"),
    PaletteColor(8, "light-blue", "#87D8F1"),
    PaletteColor(9, "maroon", "#921231"),
)


def palette_color(value: int) -> PaletteColor:
    """
    Look up the palette entry for a cell value.

    Raises:
        ValueError: If the value is not a color index 0-9.
    """
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value < len(PALETTE):
        raise ValueError(f"Cell value {value!r} is outside the palette (0-{len(PALETTE) - 1})")
    return PALETTE[value]


def color_class(value: int) -> str:
    """CSS class used for a cell holding `value`."""
    return palette_color(value).css_class
