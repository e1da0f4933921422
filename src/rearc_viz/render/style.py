"""
Stylesheet shared by every generated page.

`STYLE_BLOCK` is assembled once at import and embedded inline in each document,
so pages open without any extra assets.
"""

from __future__ import annotations

from .palette import PALETTE

CELL_SIZE = 10

_BASE_CSS = """
@import url("https://fonts.googleapis.com/css2?family=Anonymous+Pro:ital,wght@0,400;0,700;1,400;1,700");

@font-face {
    font-family: 'AtariClassicChunky';
    src: url('https://arcprize.org/media/fonts/AtariClassicChunky.eot');
    src: url('https://arcprize.org/media/fonts/AtariClassicChunky.eot?#iefix') format('embedded-opentype'),
        url('https://arcprize.org/media/fonts/AtariClassicChunky.woff2') format('woff2'),
        url('https://arcprize.org/media/fonts/AtariClassicChunky.woff') format('woff'),
        url('https://arcprize.org/media/fonts/AtariClassicChunky.svg#AtariClassicChunky') format('svg');
    font-weight: normal;
    font-style: normal;
    font-display: swap;
}
:root {
    --white: #EEEEEE;
    --offwhite: #C0C0C0;
    --black: #000000;
    --magenta: #E53AA3;
    --blue: #1E93FF;
    --blue-light: #87D8F1;
    --gray: #555555;
}
body { background-color: var(--black); color: var(--white); font-family: 'Anonymous Pro', monospace; display: flex; flex-direction: column; align-items: center; margin: 0; padding: 20px; }
h1 { font-family: 'AtariClassicChunky', monospace; color: var(--magenta); margin-bottom: 30px; }
h3 { word-break: break-all; word-wrap: anywhere; white-space: normal; height: 35pt; margin: 0px; }
.task-container { display: flex; flex-wrap: wrap; gap: 20px; width: 100%; max-width: 2200px; justify-content: center; }
.task { flex: 0 1 auto; min-width: 200px; background-color: var(--black); padding: 10px; border: 0.5px solid var(--gray); }
.task-count { text-align: center; }
.subtask { flex: 0 1 auto; min-width: 200px; background-color: var(--black); padding: 10px; }
.task-title { color: var(--offwhite); margin-bottom: 3px; font-size: 14px; }
.grid-container { display: flex; flex-direction: column; gap: 20px; }
.grid { display: grid; }
.cell { width: {cell}px; height: {cell}px; border: 0.2px solid var(--gray); }
a { color: var(--blue); text-decoration: none; }
a:hover { color: var(--blue-light); }
p { margin: 0px; }
"""


def _palette_rules() -> str:
    return "\n".join(
        f".{color.css_class} {{ background-color: {color.hex}; }}  /* {color.name} */"
        for color in PALETTE
    )


def _build_style_block() -> str:
    css = _BASE_CSS.replace("{cell}", str(CELL_SIZE))
    return f"<style>{css}{_palette_rules()}\n</style>"


STYLE_BLOCK = _build_style_block()
