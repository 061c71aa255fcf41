"""
Resolved server status models.

Each pending change resolves to exactly one of the variants below. The set
is closed: ``STATUS_VARIANTS`` lists every variant and the visitor dispatch
handles each of them explicitly.
"""

from __future__ import annotations

from datetime import datetime
from typing import ClassVar

from .base import ImmutableModel
from .changes import PendingChange


class ServerStatus(ImmutableModel):
    """Common payload carried by every status variant."""

    kind: ClassVar[str] = "server_status"

    local_version: int = 0
    is_directory: bool = False
    source_item: str | None = None
    target_item: str | None = None
    modification_date: str | None = None

    @classmethod
    def from_pending_change(cls, change: PendingChange, is_directory: bool = False):
        """Build the variant from a record; directory flag comes from the file system."""
        return cls(
            local_version=change.version,
            is_directory=is_directory,
            source_item=change.server_item,
            target_item=change.local_item,
            modification_date=change.date,
        )

    def __str__(self) -> str:
        return type(self).__name__


class CheckedOutForEdit(ServerStatus):
    kind: ClassVar[str] = "checked_out_for_edit"


class ScheduledForAddition(ServerStatus):
    kind: ClassVar[str] = "scheduled_for_addition"


class ScheduledForDeletion(ServerStatus):
    kind: ClassVar[str] = "scheduled_for_deletion"


class Undeleted(ServerStatus):
    kind: ClassVar[str] = "undeleted"


class Locked(ServerStatus):
    kind: ClassVar[str] = "locked"


class _RenameStatus(ServerStatus):
    """Rename variants also remember the item's previous server path."""

    renamed_from: str | None = None

    @classmethod
    def from_pending_change(cls, change: PendingChange, is_directory: bool = False):
        return cls(
            local_version=change.version,
            is_directory=is_directory,
            source_item=change.server_item,
            target_item=change.local_item,
            modification_date=change.date,
            renamed_from=change.source_item,
        )


class Renamed(_RenameStatus):
    kind: ClassVar[str] = "renamed"


class RenamedCheckedOut(_RenameStatus):
    kind: ClassVar[str] = "renamed_checked_out"


class Unversioned(ServerStatus):
    """
    An item the server does not track.

    There is no per-record data; the modification date is simply "now"
    since no previous version exists.
    """

    kind: ClassVar[str] = "unversioned"

    @classmethod
    def create(cls) -> Unversioned:
        return cls(modification_date=datetime.now().isoformat(timespec="seconds"))


STATUS_VARIANTS: tuple[type[ServerStatus], ...] = (
    CheckedOutForEdit,
    ScheduledForAddition,
    ScheduledForDeletion,
    RenamedCheckedOut,
    Renamed,
    Unversioned,
    Undeleted,
    Locked,
)
