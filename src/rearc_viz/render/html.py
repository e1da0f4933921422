"""
Task page and index page HTML generation.

Fragments compose bottom-up: grid markup → example block → page document.
All functions are pure; writing files is left to the site builder.
"""

from __future__ import annotations

import html
from typing import Iterable, Optional
from urllib.parse import quote

from ..config import SiteConfig
from ..tasks.models import Example, Task
from .grid import render_grid
from .style import STYLE_BLOCK

INDEX_FILENAME = "index.html"
INDEX_EXAMPLE_LABEL = "example"

_DEFAULT_CONFIG = SiteConfig()


def task_page_filename(identifier: str) -> str:
    return f"{identifier}.html"


def render_example(example: Example, label: str) -> str:
    """
    Render one input/output pair under a title like `0 (3×3 → 6×6)`.
    """
    input_grid = render_grid(example.input)
    output_grid = render_grid(example.output)
    title = f"{html.escape(label)} ({input_grid.size_label} → {output_grid.size_label})"
    return f"""<div class="subtask">
  <div class="task-title">{title}</div>
  <div class="grid-container">
    {input_grid.markup}
    {output_grid.markup}
  </div>
</div>"""


def render_task_page(task: Task, config: Optional[SiteConfig] = None) -> str:
    """
    Build the standalone detail page for a task, one block per example.
    """
    config = config or _DEFAULT_CONFIG
    identifier = html.escape(task.identifier, quote=True)
    site_title = html.escape(config.site_title, quote=True)
    examples_html = "\n".join(
        render_example(example, str(index)) for index, example in enumerate(task.examples)
    )
    body = f"""<a href="{INDEX_FILENAME}">go back to all tasks</a>
<h1>{identifier} ({_reference_anchor(task.identifier, config)})</h1>
<h3>({_count_label(task)})</h3>
<div class="task-container">
{examples_html}
</div>"""
    return _document(f"{site_title} {identifier}", body)


def render_task_tile(task: Task, config: Optional[SiteConfig] = None) -> str:
    """
    Summary tile for the index: links, example count and the first example.
    """
    config = config or _DEFAULT_CONFIG
    identifier = html.escape(task.identifier, quote=True)
    page_href = html.escape(quote(task_page_filename(task.identifier)), quote=True)
    first_example = render_example(task.examples[0], INDEX_EXAMPLE_LABEL)
    return f"""<div class="task">
<h3><a href="{page_href}">{identifier}</a> ({_reference_anchor(task.identifier, config)})</h3>
<p class="task-count">({_count_label(task)})</p>
{first_example}
</div>"""


def render_index_page(tasks: Iterable[Task], config: Optional[SiteConfig] = None) -> str:
    """
    Build the index page with one tile per task that has examples.

    Tasks are ordered by identifier whatever order they are supplied in;
    empty tasks are left out.
    """
    config = config or _DEFAULT_CONFIG
    site_title = html.escape(config.site_title, quote=True)
    project_url = html.escape(config.project_url, quote=True)
    ordered = sorted(tasks, key=lambda task: task.identifier)
    tiles = "\n".join(render_task_tile(task, config) for task in ordered if not task.is_empty)
    body = f"""<h1><a href="{project_url}">{site_title}</a> dataset visualization</h1>
<div class="task-container">
{tiles}
</div>"""
    return _document(f"{site_title} dataset visualization", body)


def _reference_anchor(identifier: str, config: SiteConfig) -> str:
    link = html.escape(config.reference_link(quote(identifier, safe="")), quote=True)
    return f'<a href="{link}">original</a>'


def _count_label(task: Task) -> str:
    return f"{task.example_count} examples"


def _document(title: str, body: str) -> str:
    return f"""<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{title}</title>
  {STYLE_BLOCK}
</head>
<body>
{body}
</body>
</html>
"""
