import json
from pathlib import Path
from typing import Callable, Dict, List

import pytest
from typer.testing import CliRunner


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def write_tasks(tmp_path: Path) -> Callable[[Dict[str, object]], Path]:
    """
    Return a helper that writes task files into tmp_path/tasks.

    Values are serialized with json.dumps unless they are already strings,
    which lets tests write deliberately broken content.
    """
    tasks_dir = tmp_path / "tasks"

    def _write(files: Dict[str, object]) -> Path:
        tasks_dir.mkdir(parents=True, exist_ok=True)
        for name, payload in files.items():
            text = payload if isinstance(payload, str) else json.dumps(payload)
            (tasks_dir / name).write_text(text, encoding="utf-8")
        return tasks_dir

    return _write


@pytest.fixture
def checker_example() -> Dict[str, List[List[int]]]:
    return {"input": [[0, 1], [1, 0]], "output": [[1, 1], [1, 1]]}
