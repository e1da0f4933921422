"""
Exceptions raised while building the visualization site.

Every error is fatal to a build; the CLI reports the message and exits.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class VisualizationError(RuntimeError):
    """
    Base class for build failures.

    Attributes:
        path: File or directory the failure relates to, when known.
        detail: The message without the path prefix.
    """

    def __init__(self, detail: str, *, path: Optional[Path | str] = None) -> None:
        self.path = Path(path) if path is not None else None
        self.detail = detail
        message = f"{self.path}: {detail}" if self.path is not None else detail
        super().__init__(message)


class FileSystemError(VisualizationError):
    """Raised when a directory or file cannot be read, created, or written."""


class MalformedTaskFile(VisualizationError):
    """Raised when task file content does not decode into input/output records."""


class StructuralGridError(VisualizationError):
    """Raised when a grid is empty or its rows differ in length."""
