import json
from pathlib import Path

import pytest

from rearc_viz.errors import FileSystemError, MalformedTaskFile, StructuralGridError
from rearc_viz.tasks import Dataset, Task, load_task, parse_task, task_identifier


def test_parse_task_preserves_example_order() -> None:
    content = json.dumps(
        [
            {"input": [[1]], "output": [[2]]},
            {"input": [[3, 4]], "output": [[5], [6]]},
        ]
    )

    task = parse_task(content, "abc123")

    assert task.identifier == "abc123"
    assert task.example_count == 2
    assert task.examples[0].input == ((1,),)
    assert task.examples[1].input == ((3, 4),)
    assert task.examples[1].output == ((5,), (6,))


def test_parse_task_accepts_empty_array() -> None:
    task = parse_task("[]", "empty")

    assert task.is_empty
    assert task.examples == ()


def test_parse_task_ignores_extra_fields() -> None:
    content = json.dumps([{"input": [[0]], "output": [[0]], "note": "ignored"}])

    assert parse_task(content, "extra").example_count == 1


def test_parse_task_does_not_enforce_color_range() -> None:
    task = parse_task(json.dumps([{"input": [[12]], "output": [[0]]}]), "wide")

    assert task.examples[0].input == ((12,),)


def test_models_are_immutable() -> None:
    task = parse_task(json.dumps([{"input": [[0]], "output": [[0]]}]), "frozen")

    with pytest.raises(Exception):
        task.identifier = "other"  # type: ignore[misc]
    with pytest.raises(Exception):
        task.examples[0].input = ((1,),)  # type: ignore[misc]


def test_invalid_json_is_malformed() -> None:
    with pytest.raises(MalformedTaskFile) as exc:
        parse_task("[{", "broken", source=Path("tasks/broken.json"))

    assert "broken.json" in str(exc.value)
    assert "invalid JSON" in str(exc.value)


def test_non_array_root_is_malformed() -> None:
    with pytest.raises(MalformedTaskFile) as exc:
        parse_task(json.dumps({"train": []}), "arc-style")

    assert "expected an array" in str(exc.value)


def test_missing_output_is_malformed() -> None:
    content = json.dumps([{"input": [[0]], "output": [[0]]}, {"input": [[0]]}])

    with pytest.raises(MalformedTaskFile) as exc:
        parse_task(content, "missing")

    assert "example 1 output" in str(exc.value)


@pytest.mark.parametrize("cell", ["1", 1.5, True, None])
def test_non_integer_cells_are_malformed(cell) -> None:
    content = json.dumps([{"input": [[cell]], "output": [[0]]}])

    with pytest.raises(MalformedTaskFile):
        parse_task(content, "cells")


@pytest.mark.parametrize(
    "grid, message",
    [
        ([], "no rows"),
        ([[]], "empty first row"),
        ([[0, 1], [0]], "not rectangular"),
    ],
)
def test_structural_grid_errors(grid, message) -> None:
    content = json.dumps([{"input": [[0]], "output": grid}])

    with pytest.raises(StructuralGridError) as exc:
        parse_task(content, "shape", source=Path("shape.json"))

    assert message in str(exc.value)
    assert "example 0 output" in str(exc.value)
    assert exc.value.path == Path("shape.json")


def test_task_identifier_strips_json_suffix() -> None:
    assert task_identifier(Path("tasks/007bbfc7.json")) == "007bbfc7"


@pytest.mark.parametrize("name", ["notes.txt", "README", ".json"])
def test_task_identifier_rejects_other_names(name: str) -> None:
    with pytest.raises(MalformedTaskFile):
        task_identifier(Path(name))


def test_load_task_reads_file(tmp_path: Path, checker_example) -> None:
    path = tmp_path / "a1b2.json"
    path.write_text(json.dumps([checker_example]), encoding="utf-8")

    task = load_task(path)

    assert task.identifier == "a1b2"
    assert task.examples[0].output == ((1, 1), (1, 1))


def test_load_task_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileSystemError) as exc:
        load_task(tmp_path / "gone.json")

    assert exc.value.path == tmp_path / "gone.json"


def test_dataset_iterates_in_identifier_order() -> None:
    dataset = Dataset()
    for identifier in ["c", "a", "b"]:
        dataset.add(Task(identifier=identifier))

    assert [task.identifier for task in dataset] == ["a", "b", "c"]
    assert len(dataset) == 3
    assert "b" in dataset


def test_dataset_rejects_duplicates() -> None:
    dataset = Dataset()
    dataset.add(Task(identifier="a"))

    with pytest.raises(ValueError):
        dataset.add(Task(identifier="a"))


def test_deeply_nested_json_is_malformed() -> None:
    content = "[" * 100000 + "]" * 100000

    with pytest.raises(MalformedTaskFile) as exc:
        parse_task(content, "deep", source=Path("deep.json"))

    assert "nested too deeply" in str(exc.value)
    assert exc.value.path == Path("deep.json")
