"""
Path engine: the repository ("server") namespace rooted at ``$/`` and its
mapping onto the local file system.
"""

from .mapping import WorkspaceMappings
from .server import ROOT, canonicalize, common_ancestor, is_canonical, is_child

__all__ = [
    "ROOT",
    "WorkspaceMappings",
    "canonicalize",
    "common_ancestor",
    "is_canonical",
    "is_child",
]
