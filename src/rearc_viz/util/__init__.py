"""
Shared filesystem helpers.
"""

from .filesystem import ensure_directory, file_lock, write_text_file

__all__ = ["ensure_directory", "file_lock", "write_text_file"]
