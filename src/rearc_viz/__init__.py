"""
Core package for the RE-ARC dataset visualization tooling.
"""

from importlib import metadata as _metadata

try:
    __version__ = _metadata.version("rearc-viz")
except _metadata.PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

__all__ = ["__version__"]
