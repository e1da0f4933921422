"""
Puzzle task data model and task file parsing.
"""

from .models import Dataset, Example, Grid, Task, grid_shape
from .parser import TASK_SUFFIX, load_task, parse_task, task_identifier

__all__ = [
    "Dataset",
    "Example",
    "Grid",
    "Task",
    "grid_shape",
    "TASK_SUFFIX",
    "load_task",
    "parse_task",
    "task_identifier",
]
