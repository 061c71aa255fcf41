"""
Unit tests for pending change and server status models.

Tests cover:
- ChangeType parsing (case, whitespace, duplicates, unknown tokens)
- PendingChange construction from Python values and wire dictionaries
- ServerStatus variants built from records
"""

from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError

from tfvc.core.models.changes import ChangeType, PendingChange
from tfvc.core.models.status import (
    STATUS_VARIANTS,
    CheckedOutForEdit,
    Renamed,
    RenamedCheckedOut,
    ServerStatus,
    Unversioned,
)


class TestChangeTypeParsing:
    """Tests for ChangeType.parse and from_token."""

    def test_comma_separated(self):
        assert ChangeType.parse("edit, rename") == {ChangeType.EDIT, ChangeType.RENAME}

    def test_case_insensitive(self):
        assert ChangeType.parse(["Edit", "RENAME"]) == {ChangeType.EDIT, ChangeType.RENAME}

    def test_duplicates_collapse(self):
        assert ChangeType.parse("edit,Edit, EDIT") == {ChangeType.EDIT}

    def test_empty_tokens_skipped(self):
        assert ChangeType.parse("") == frozenset()
        assert ChangeType.parse("edit,,") == {ChangeType.EDIT}

    def test_unknown_token(self):
        assert ChangeType.parse("encoding") == {ChangeType.UNKNOWN}

    def test_unknown_token_logged(self):
        logger = MagicMock()
        ChangeType.from_token("property", logger)
        logger.warning.assert_called_once()
        assert "property" in str(logger.warning.call_args)

    def test_known_token_not_logged(self):
        logger = MagicMock()
        assert ChangeType.from_token(" lock ", logger) is ChangeType.LOCK
        logger.warning.assert_not_called()

    def test_members_pass_through(self):
        assert ChangeType.parse([ChangeType.MERGE]) == {ChangeType.MERGE}


class TestPendingChange:
    """Tests for the PendingChange model."""

    def test_defaults(self):
        change = PendingChange(server_item="$/a", local_item="/w/a")
        assert change.change_types == frozenset()
        assert change.is_candidate is False
        assert change.version == 0

    def test_change_types_from_string(self):
        change = PendingChange(server_item="$/a", local_item="/w/a", change_types="edit,lock")
        assert change.has(ChangeType.EDIT, ChangeType.LOCK)
        assert not change.has(ChangeType.EDIT, ChangeType.RENAME)

    def test_version_from_string(self):
        change = PendingChange(server_item="$/a", local_item="/w/a", version="42")
        assert change.version == 42

    def test_immutable(self):
        change = PendingChange(server_item="$/a", local_item="/w/a")
        with pytest.raises(ValidationError):
            change.version = 3

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            PendingChange(server_item="$/a", local_item="/w/a", colour="blue")

    def test_from_wire(self):
        change = PendingChange.from_wire(
            {
                "serverItem": "$/Proj/a.c",
                "localItem": "U:\\w\\a.c",
                "changeTypes": "Edit, Rename",
                "isCandidate": False,
                "sourceItem": "$/Proj/old.c",
                "version": "5",
                "owner": "DOMAIN\\dev",
            }
        )
        assert change.server_item == "$/Proj/a.c"
        assert change.local_item == "U:\\w\\a.c"
        assert change.change_types == {ChangeType.EDIT, ChangeType.RENAME}
        assert change.source_item == "$/Proj/old.c"
        assert change.version == 5
        assert change.owner == "DOMAIN\\dev"

    def test_from_wire_logs_unknown_type(self):
        logger = MagicMock()
        change = PendingChange.from_wire(
            {"serverItem": "$/a", "localItem": "/w/a", "changeTypes": ["edit", "encoding"]},
            logger,
        )
        assert change.change_types == {ChangeType.EDIT, ChangeType.UNKNOWN}
        logger.warning.assert_called_once()

    def test_from_wire_requires_local_item(self):
        with pytest.raises(ValidationError):
            PendingChange.from_wire({"serverItem": "$/a"})

    def test_server_item_canonicalized(self):
        change = PendingChange(server_item="$/A\\b/", local_item="/w/b", source_item="\\A\\old")
        assert change.server_item == "$/A/b"
        assert change.source_item == "$/A/old"

    @pytest.mark.parametrize("server_item", ["not a repo path: $$//CON", "relative/a", "$/a/..", ""])
    def test_malformed_server_item_rejected(self, server_item):
        with pytest.raises(ValidationError):
            PendingChange.from_wire({"serverItem": server_item, "localItem": "/w/a"})

    def test_malformed_source_item_rejected(self):
        with pytest.raises(ValidationError):
            PendingChange(server_item="$/a", local_item="/w/a", source_item="$/x/$y")

    def test_empty_source_item_is_none(self):
        assert PendingChange(server_item="$/a", local_item="/w/a", source_item="").source_item is None


class TestServerStatus:
    """Tests for ServerStatus variants."""

    def test_from_pending_change(self, make_change):
        record = make_change("edit", source_item="$/Project/old.txt")
        status = CheckedOutForEdit.from_pending_change(record, is_directory=True)
        assert status.local_version == 7
        assert status.is_directory is True
        assert status.source_item == "$/Project/file.txt"
        assert status.target_item == "/work/Project/file.txt"
        assert status.modification_date == "2024-03-01T10:00:00"

    @pytest.mark.parametrize("variant", [Renamed, RenamedCheckedOut])
    def test_rename_variants_remember_previous_path(self, make_change, variant):
        record = make_change("rename", source_item="$/Project/old.txt")
        assert variant.from_pending_change(record).renamed_from == "$/Project/old.txt"

    def test_unversioned(self):
        status = Unversioned.create()
        assert status.local_version == 0
        assert status.modification_date is not None

    def test_variants_are_distinct(self):
        assert len(set(STATUS_VARIANTS)) == 8
        assert all(issubclass(variant, ServerStatus) for variant in STATUS_VARIANTS)
        assert len({variant.kind for variant in STATUS_VARIANTS}) == 8

    def test_str_is_variant_name(self):
        assert str(Unversioned.create()) == "Unversioned"
