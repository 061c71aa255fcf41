"""
Change list construction.

``ChangeListBuilder`` is the reference visitor: it turns classified pending
changes into host-agnostic change list entries.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum

from pydantic import Field

from ..core.models.base import ImmutableModel, TfvcBaseModel
from ..core.models.status import ServerStatus
from .visitor import StatusAdapter


class ChangeKind(str, Enum):
    MODIFIED = "modified"
    ADDED = "added"
    DELETED = "deleted"
    RENAMED = "renamed"
    UNVERSIONED = "unversioned"
    LOCKED = "locked"
    LOCALLY_DELETED = "locally_deleted"


class ChangeEntry(ImmutableModel):
    """One line of the change list."""

    kind: ChangeKind
    local_path: str
    server_item: str | None = None
    base_version: int | None = None
    renamed_from: str | None = None
    is_directory: bool = False


class ChangeList(TfvcBaseModel):
    """Ordered change list entries."""

    entries: list[ChangeEntry] = Field(default_factory=list)

    def __iter__(self) -> Iterator[ChangeEntry]:  # type: ignore[override]
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def add(self, entry: ChangeEntry) -> None:
        self.entries.append(entry)

    def by_kind(self, kind: ChangeKind) -> list[ChangeEntry]:
        return [entry for entry in self.entries if entry.kind == kind]


class ChangeListBuilder(StatusAdapter):
    """
    Visitor that records each status as a change list entry.

    A missing local item turns edits, additions and renames into
    locally deleted entries; unversioned items are only reported while
    they exist.
    """

    def __init__(self, include_unversioned: bool = True) -> None:
        self.change_list = ChangeList()
        self._include_unversioned = include_unversioned

    def _entry(
        self,
        kind: ChangeKind,
        local_path: str,
        status: ServerStatus,
        base_version: int | None = None,
        renamed_from: str | None = None,
    ) -> None:
        self.change_list.add(
            ChangeEntry(
                kind=kind,
                local_path=local_path,
                server_item=status.source_item,
                base_version=base_version,
                renamed_from=renamed_from,
                is_directory=status.is_directory,
            )
        )

    def _locally_deleted(self, local_path: str, status: ServerStatus) -> None:
        self._entry(ChangeKind.LOCALLY_DELETED, local_path, status, base_version=status.local_version)

    def checked_out_for_edit(self, local_path, local_item_exists, status) -> None:
        if local_item_exists:
            self._entry(ChangeKind.MODIFIED, local_path, status, base_version=status.local_version)
        else:
            self._locally_deleted(local_path, status)

    def undeleted(self, local_path, local_item_exists, status) -> None:
        self.checked_out_for_edit(local_path, local_item_exists, status)

    def scheduled_for_addition(self, local_path, local_item_exists, status) -> None:
        if local_item_exists:
            self._entry(ChangeKind.ADDED, local_path, status)
        else:
            self._locally_deleted(local_path, status)

    def scheduled_for_deletion(self, local_path, local_item_exists, status) -> None:
        self._entry(ChangeKind.DELETED, local_path, status, base_version=status.local_version)

    def renamed(self, local_path, local_item_exists, status) -> None:
        if local_item_exists:
            self._entry(
                ChangeKind.RENAMED,
                local_path,
                status,
                base_version=status.local_version,
                renamed_from=status.renamed_from,
            )
        else:
            self._locally_deleted(local_path, status)

    def renamed_checked_out(self, local_path, local_item_exists, status) -> None:
        self.renamed(local_path, local_item_exists, status)

    def unversioned(self, local_path, local_item_exists, status) -> None:
        if local_item_exists and self._include_unversioned:
            self._entry(ChangeKind.UNVERSIONED, local_path, status)

    def locked(self, local_path, local_item_exists, status) -> None:
        self._entry(ChangeKind.LOCKED, local_path, status, base_version=status.local_version)
