"""
Site generation (task discovery, page writing, index).
"""

from .site import BuildReport, build_site, build_task_page, discover_task_files, resolve_directory

__all__ = ["BuildReport", "build_site", "build_task_page", "discover_task_files", "resolve_directory"]
