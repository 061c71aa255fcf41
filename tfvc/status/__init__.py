"""
Change classifier: resolves pending-change records to a status and
dispatches them to visitors.
"""

from .changelist import ChangeEntry, ChangeKind, ChangeList, ChangeListBuilder
from .provider import RULES, ClassifiedChange, StatusProvider, classify
from .visitor import StatusAdapter, StatusVisitor, dispatch

__all__ = [
    "RULES",
    "ChangeEntry",
    "ChangeKind",
    "ChangeList",
    "ChangeListBuilder",
    "ClassifiedChange",
    "StatusAdapter",
    "StatusProvider",
    "StatusVisitor",
    "classify",
    "dispatch",
]
