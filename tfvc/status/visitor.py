"""
Status visitors.

A visitor receives one callback per resolved pending change. ``dispatch``
routes a status to the matching callback and is exhaustive over the closed
variant set.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..core.models.status import (
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


class StatusVisitor(ABC):
    """
    Consumer of classified pending changes.

    Every callback receives the native local path, whether the local item
    currently exists, and the resolved status. Callbacks may raise; the
    exception reaches the caller unchanged.
    """

    @abstractmethod
    def checked_out_for_edit(
        self, local_path: str, local_item_exists: bool, status: CheckedOutForEdit
    ) -> None:
        pass

    @abstractmethod
    def scheduled_for_addition(
        self, local_path: str, local_item_exists: bool, status: ScheduledForAddition
    ) -> None:
        pass

    @abstractmethod
    def scheduled_for_deletion(
        self, local_path: str, local_item_exists: bool, status: ScheduledForDeletion
    ) -> None:
        pass

    @abstractmethod
    def renamed_checked_out(
        self, local_path: str, local_item_exists: bool, status: RenamedCheckedOut
    ) -> None:
        pass

    @abstractmethod
    def renamed(self, local_path: str, local_item_exists: bool, status: Renamed) -> None:
        pass

    @abstractmethod
    def unversioned(self, local_path: str, local_item_exists: bool, status: Unversioned) -> None:
        pass

    @abstractmethod
    def undeleted(self, local_path: str, local_item_exists: bool, status: Undeleted) -> None:
        pass

    @abstractmethod
    def locked(self, local_path: str, local_item_exists: bool, status: Locked) -> None:
        pass


class StatusAdapter(StatusVisitor):
    """Visitor with every callback a no-op; override only what you need."""

    def checked_out_for_edit(self, local_path, local_item_exists, status) -> None:
        pass

    def scheduled_for_addition(self, local_path, local_item_exists, status) -> None:
        pass

    def scheduled_for_deletion(self, local_path, local_item_exists, status) -> None:
        pass

    def renamed_checked_out(self, local_path, local_item_exists, status) -> None:
        pass

    def renamed(self, local_path, local_item_exists, status) -> None:
        pass

    def unversioned(self, local_path, local_item_exists, status) -> None:
        pass

    def undeleted(self, local_path, local_item_exists, status) -> None:
        pass

    def locked(self, local_path, local_item_exists, status) -> None:
        pass


def dispatch(
    visitor: StatusVisitor,
    status: ServerStatus,
    local_path: str,
    local_item_exists: bool,
) -> None:
    """
    Invoke the visitor callback matching ``status``.

    ``RenamedCheckedOut`` and ``Renamed`` share a base class but are
    distinct variants, so each check is on the concrete type.

    Raises:
        TypeError: If ``status`` is not one of the known variants
    """
    kind = type(status)
    if kind is CheckedOutForEdit:
        visitor.checked_out_for_edit(local_path, local_item_exists, status)
    elif kind is ScheduledForAddition:
        visitor.scheduled_for_addition(local_path, local_item_exists, status)
    elif kind is ScheduledForDeletion:
        visitor.scheduled_for_deletion(local_path, local_item_exists, status)
    elif kind is RenamedCheckedOut:
        visitor.renamed_checked_out(local_path, local_item_exists, status)
    elif kind is Renamed:
        visitor.renamed(local_path, local_item_exists, status)
    elif kind is Unversioned:
        visitor.unversioned(local_path, local_item_exists, status)
    elif kind is Undeleted:
        visitor.undeleted(local_path, local_item_exists, status)
    elif kind is Locked:
        visitor.locked(local_path, local_item_exists, status)
    else:
        raise TypeError(f"Unknown server status variant: {kind.__name__}")
