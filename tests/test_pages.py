import re

from rearc_viz.config import SiteConfig
from rearc_viz.render import render_example, render_index_page, render_task_page
from rearc_viz.tasks import Example, Task

TITLE_PATTERN = re.compile(r'<div class="task-title">(.*?)</div>')
CELL_PATTERN = re.compile(r'class="cell color-(\d+)"')


def _example(value: int, rows: int = 1, cols: int = 1) -> Example:
    grid = tuple(tuple(value for _ in range(cols)) for _ in range(rows))
    return Example(input=grid, output=grid)


def _checker_task(identifier: str = "checker") -> Task:
    return Task(
        identifier=identifier,
        examples=(Example(input=((0, 1), (1, 0)), output=((1, 1), (1, 1))),),
    )


def test_render_example_stacks_input_then_output() -> None:
    example = Example(input=((0, 1), (1, 0)), output=((1, 1), (1, 1), (1, 1)))

    block = render_example(example, "3")

    assert TITLE_PATTERN.findall(block) == ["3 (2×2 → 3×2)"]
    assert CELL_PATTERN.findall(block) == ["0", "1", "1", "0", "1", "1", "1", "1", "1", "1"]
    assert block.count('<div class="grid"') == 2


def test_task_page_first_block_matches_checker_example() -> None:
    page = render_task_page(_checker_task())

    assert TITLE_PATTERN.findall(page)[0] == "0 (2×2 → 2×2)"
    assert CELL_PATTERN.findall(page) == ["0", "1", "1", "0", "1", "1", "1", "1"]


def test_task_page_labels_examples_by_index_in_order() -> None:
    task = Task(identifier="multi", examples=tuple(_example(value, rows=value + 1) for value in range(4)))

    page = render_task_page(task)

    titles = TITLE_PATTERN.findall(page)
    assert titles == ["0 (1×1 → 1×1)", "1 (2×1 → 2×1)", "2 (3×1 → 3×1)", "3 (4×1 → 4×1)"]
    assert page.count('<div class="subtask">') == 4


def test_task_page_header_links() -> None:
    page = render_task_page(_checker_task("007bbfc7"))

    assert page.startswith("<!DOCTYPE html>")
    assert "<title>RE-ARC 007bbfc7</title>" in page
    assert '<a href="index.html">go back to all tasks</a>' in page
    assert '<a href="https://arcprize.org/play?task=007bbfc7">original</a>' in page
    assert "(1 examples)" in page
    assert "<style>" in page
    assert "<script" not in page


def test_empty_task_page_is_valid_document() -> None:
    page = render_task_page(Task(identifier="nothing"))

    assert "(0 examples)" in page
    assert '<div class="subtask">' not in page
    assert page.rstrip().endswith("</html>")


def test_task_page_escapes_identifier() -> None:
    page = render_task_page(Task(identifier="a<b"))

    assert "<title>RE-ARC a&lt;b</title>" in page
    assert "task=a%3Cb" in page


def test_task_page_uses_configured_links() -> None:
    config = SiteConfig(site_title="ARC", reference_url="https://example.org/tasks/{task_id}")

    page = render_task_page(_checker_task("xyz"), config)

    assert "<title>ARC xyz</title>" in page
    assert 'href="https://example.org/tasks/xyz"' in page


def test_index_shows_one_example_per_nonempty_task() -> None:
    tasks = [
        Task(identifier="b", examples=(_example(2), _example(3, rows=2), _example(4, cols=3))),
        Task(identifier="empty"),
        Task(identifier="a", examples=(_example(1, rows=2, cols=3),)),
    ]

    page = render_index_page(tasks)

    assert page.count('<div class="task">') == 2
    assert page.count('<div class="subtask">') == 2
    assert TITLE_PATTERN.findall(page) == ["example (2×3 → 2×3)", "example (1×1 → 1×1)"]
    assert CELL_PATTERN.findall(page) == ["1"] * 12 + ["2", "2"]
    assert "empty" not in page
    assert page.index('href="a.html"') < page.index('href="b.html"')
    assert "(3 examples)" in page


def test_index_order_does_not_depend_on_input_order() -> None:
    tasks = [Task(identifier=name, examples=(_example(0),)) for name in ["c", "a", "b"]]

    assert render_index_page(tasks) == render_index_page(list(reversed(tasks)))


def test_index_heading_links_project() -> None:
    page = render_index_page([])

    assert '<h1><a href="https://github.com/michaelhodel/re-arc/">RE-ARC</a> dataset visualization</h1>' in page
    assert '<div class="task">' not in page
