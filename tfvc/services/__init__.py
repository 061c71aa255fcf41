"""Concrete service implementations for tfvc's interfaces."""

from .filesystem import LocalFileSystem
from .logging import NullLogger, TfvcLogger

__all__ = [
    "LocalFileSystem",
    "NullLogger",
    "TfvcLogger",
]
