"""
tfvc - path-space and pending-change classification for Team Foundation
Version Control.
"""

from .path import WorkspaceMappings, canonicalize, common_ancestor, is_canonical, is_child
from .status import ChangeListBuilder, StatusAdapter, StatusProvider, StatusVisitor

__all__ = [
    "ChangeListBuilder",
    "StatusAdapter",
    "StatusProvider",
    "StatusVisitor",
    "WorkspaceMappings",
    "canonicalize",
    "common_ancestor",
    "is_canonical",
    "is_child",
]
