"""
Filesystem helpers shared by the site builder.
"""

from __future__ import annotations

import os
import tempfile
from contextlib import contextmanager
from pathlib import Path

from filelock import FileLock

from ..errors import FileSystemError


def ensure_directory(path: Path | str) -> Path:
    """
    Ensure a directory exists (parents included), returning the resolved Path.
    """
    resolved = Path(path).expanduser().resolve()
    try:
        resolved.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise FileSystemError(f"unable to create directory: {exc.strerror or exc}", path=resolved) from exc
    return resolved


@contextmanager
def file_lock(path: Path | str):
    """Context manager for a hidden lock file beside the target, removed on release."""
    target = Path(path).expanduser().resolve()
    lock_path = target.with_name(f".{target.name}.lock")
    try:
        with FileLock(str(lock_path)):
            yield
    finally:
        try:
            lock_path.unlink()
        except OSError:
            pass


def _atomic_write_text(target: Path, content: str, encoding: str) -> None:
    """Write text atomically by staging a temp file and renaming."""
    fd, tmp_path = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=target.parent)
    try:
        with os.fdopen(fd, "w", encoding=encoding) as handle:
            handle.write(content)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(tmp_path, target)
    finally:
        try:
            os.unlink(tmp_path)
        except FileNotFoundError:
            pass


def write_text_file(path: Path | str, content: str, encoding: str = "utf-8", *, lock: bool = True) -> Path:
    """
    Write text to a file, replacing it atomically.

    Raises:
        FileSystemError: If the file cannot be written.
    """
    target = Path(path).expanduser().resolve()
    try:
        if lock:
            with file_lock(target):
                _atomic_write_text(target, content, encoding=encoding)
        else:
            _atomic_write_text(target, content, encoding=encoding)
    except OSError as exc:
        raise FileSystemError(f"unable to write file: {exc.strerror or exc}", path=target) from exc
    return target
