"""
Decode task files into Task models.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Optional

from pydantic import TypeAdapter, ValidationError

from ..errors import FileSystemError, MalformedTaskFile, StructuralGridError
from .models import Example, Task, grid_shape

logger = logging.getLogger(__name__)

TASK_SUFFIX = ".json"

_EXAMPLES_ADAPTER = TypeAdapter(List[Example])
_MAX_REPORTED_ERRORS = 3


def task_identifier(path: Path | str) -> str:
    """
    Derive the task identifier from a task file name.

    Raises:
        MalformedTaskFile: If the file name does not end with `.json` or has nothing before it.
    """
    name = Path(path).name
    if not name.endswith(TASK_SUFFIX) or name == TASK_SUFFIX:
        raise MalformedTaskFile(f"task file name must end with {TASK_SUFFIX}", path=path)
    return name[: -len(TASK_SUFFIX)]


def parse_task(content: str, identifier: str, *, source: Optional[Path | str] = None) -> Task:
    """
    Decode raw task content into a Task.

    This is a structural decode: each record needs `input` and `output` grids of
    integers and every grid must be rectangular. Color ranges are not checked.

    Args:
        content: Serialized JSON array of `{"input": ..., "output": ...}` objects.
        identifier: Task identifier, usually derived from the file name.
        source: File the content came from, used in error messages.

    Raises:
        MalformedTaskFile: If the content is not JSON or records are missing fields.
        StructuralGridError: If a grid is empty or non-rectangular.
    """
    where = source if source is not None else identifier
    try:
        raw = json.loads(content)
    except json.JSONDecodeError as exc:
        raise MalformedTaskFile(f"invalid JSON: {exc}", path=where) from exc
    except RecursionError as exc:
        raise MalformedTaskFile("invalid JSON: arrays or objects nested too deeply", path=where) from exc

    if not isinstance(raw, list):
        raise MalformedTaskFile(
            f"expected an array of examples, got {type(raw).__name__}", path=where
        )

    try:
        examples = _EXAMPLES_ADAPTER.validate_python(raw)
    except ValidationError as exc:
        raise MalformedTaskFile(_describe_validation_error(exc), path=where) from exc

    for index, example in enumerate(examples):
        for side in ("input", "output"):
            try:
                grid_shape(getattr(example, side))
            except StructuralGridError as exc:
                raise StructuralGridError(f"example {index} {side}: {exc.detail}", path=where) from exc

    logger.debug("Parsed task %s with %d examples", identifier, len(examples))
    return Task(identifier=identifier, examples=tuple(examples))


def load_task(path: Path | str) -> Task:
    """
    Read and parse a task file; the identifier is the file name without `.json`.

    Raises:
        FileSystemError: If the file cannot be read.
        MalformedTaskFile: If the name or content is malformed.
        StructuralGridError: If a grid is empty or non-rectangular.
    """
    task_path = Path(path)
    identifier = task_identifier(task_path)
    try:
        content = task_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedTaskFile(f"file is not valid UTF-8: {exc}", path=task_path) from exc
    except OSError as exc:
        raise FileSystemError(f"unable to read task file: {exc.strerror or exc}", path=task_path) from exc
    return parse_task(content, identifier, source=task_path)


def _describe_validation_error(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors()[:_MAX_REPORTED_ERRORS]:
        location = _format_location(error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg', 'invalid value')}")
    remaining = exc.error_count() - len(parts)
    if remaining > 0:
        parts.append(f"and {remaining} more error(s)")
    return "; ".join(parts)


def _format_location(loc: tuple) -> str:
    if not loc:
        return "examples"
    head, *rest = loc
    label = f"example {head}"
    if rest:
        label += " " + ".".join(str(part) for part in rest)
    return label
