"""
Pydantic models for tfvc.

Pending changes, resolved statuses, workspace mappings and configuration.
"""

from .base import ImmutableModel, TfvcBaseModel
from .changes import ChangeType, PendingChange
from .config import LoggingConfig, StatusConfig, TfvcConfig, WorkspaceConfig
from .mapping import WorkingFolder
from .status import (
    STATUS_VARIANTS,
    CheckedOutForEdit,
    Locked,
    Renamed,
    RenamedCheckedOut,
    ScheduledForAddition,
    ScheduledForDeletion,
    ServerStatus,
    Undeleted,
    Unversioned,
)

__all__ = [
    "STATUS_VARIANTS",
    "ChangeType",
    "CheckedOutForEdit",
    "ImmutableModel",
    "Locked",
    "LoggingConfig",
    "PendingChange",
    "Renamed",
    "RenamedCheckedOut",
    "ScheduledForAddition",
    "ScheduledForDeletion",
    "ServerStatus",
    "StatusConfig",
    "TfvcBaseModel",
    "TfvcConfig",
    "Undeleted",
    "Unversioned",
    "WorkingFolder",
    "WorkspaceConfig",
]
