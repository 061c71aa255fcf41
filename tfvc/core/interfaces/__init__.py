"""
Interface definitions for tfvc's collaborators.

These abstract classes define the contracts that implementations must
follow, so the engine depends on capabilities rather than concrete hosts.
"""

from .filesystem import IFileSystem
from .logger import ILogger
from .presenter import IPresenter

__all__ = [
    "IFileSystem",
    "ILogger",
    "IPresenter",
]
