"""
Pydantic models for puzzle tasks and the dataset assembled from them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, Tuple

from pydantic import BaseModel, Field, StrictInt

from ..errors import StructuralGridError

Grid = Tuple[Tuple[StrictInt, ...], ...]


def grid_shape(grid: Grid) -> tuple[int, int]:
    """
    Return `(rows, cols)` for a grid, checking that it is non-empty and rectangular.

    Raises:
        StructuralGridError: If the grid has no rows, an empty first row, or ragged rows.
    """
    if not grid:
        raise StructuralGridError("grid has no rows")
    cols = len(grid[0])
    if cols == 0:
        raise StructuralGridError("grid has an empty first row")
    for index, row in enumerate(grid):
        if len(row) != cols:
            raise StructuralGridError(
                f"grid is not rectangular: row {index} has {len(row)} cells, expected {cols}"
            )
    return len(grid), cols


class Example(BaseModel):
    """
    One input/output grid pair.

    Attributes:
        input: Grid shown first.
        output: Grid shown second.
    """
    input: Grid
    output: Grid

    model_config = {"frozen": True}


class Task(BaseModel):
    """
    Examples read from a single task file.

    Attributes:
        identifier: File name without the `.json` extension.
        examples: Examples in file order.
    """
    identifier: str
    examples: Tuple[Example, ...] = Field(default_factory=tuple)

    model_config = {"frozen": True}

    @property
    def example_count(self) -> int:
        return len(self.examples)

    @property
    def is_empty(self) -> bool:
        return not self.examples


@dataclass
class Dataset:
    """
    Tasks parsed during one build, keyed by identifier.

    Iteration is always in identifier order so generated pages are reproducible
    regardless of how the filesystem lists the task directory.
    """
    tasks: Dict[str, Task] = field(default_factory=dict)

    def add(self, task: Task) -> None:
        if task.identifier in self.tasks:
            raise ValueError(f"Duplicate task identifier: {task.identifier}")
        self.tasks[task.identifier] = task

    def __len__(self) -> int:
        return len(self.tasks)

    def __iter__(self) -> Iterator[Task]:
        for identifier in sorted(self.tasks):
            yield self.tasks[identifier]

    def __contains__(self, identifier: object) -> bool:
        return identifier in self.tasks

    def non_empty(self) -> Iterator[Task]:
        """Yield tasks with at least one example, in identifier order."""
        return (task for task in self if not task.is_empty)
