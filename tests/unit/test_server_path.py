"""
Unit tests for repository (server) path handling.

Tests cover:
- canonicalize: separators, dot components, trailing cleanup, every error kind
- is_canonical and its agreement with canonicalize
- is_child, make_relative, make_local and the local round trip
- common_ancestor and the smaller path helpers
"""

import functools
import os

import pytest

from tfvc.core.exceptions import (
    ComponentTooLongError,
    EmbeddedSigilError,
    EmptyServerPathError,
    EscapesRootError,
    InvalidCharacterError,
    NotAbsoluteServerPathError,
    PathErrorKind,
    ReservedNameError,
    ServerPathFormatError,
    ServerPathTooLongError,
    TfvcValidationError,
)
from tfvc.path import local, server

LONG_PATH = "$/" + "/".join(["abcdefghi"] * 40)  # 401 characters

SAMPLE_PATHS = [
    "",
    "$",
    "$/",
    "/",
    "\\",
    "$/a",
    "$/a/",
    "$/a//b",
    "$/a/./b",
    "$/a/../b",
    "$/a/b/..",
    "$/A/b",
    "$/a.",
    "$/a ",
    "$/ a",
    "$/a ",
    "$/...",
    "$/a/...",
    "$/a$b",
    "$/$a",
    "$/a/$b",
    "$/CON",
    "$/con.txt",
    "$/COM0",
    "$/COM1",
    "$/lpt9",
    "$/NUL/x",
    "$/a;b",
    "$/a*b",
    "$/a?b",
    "$/a:b",
    "$/a|b",
    '$/a"b',
    "$/a<b>",
    "$/a\x01b",
    "$\\a",
    "\\a\\b",
    "a/b",
    "$a",
    "$/..",
    "$/a/..",
    "$/été",
    "$/" + "x" * 256,
    "$/" + "x" * 257,
    LONG_PATH,
]


def _canonicalizes_to_itself(path: str) -> bool:
    try:
        return server.canonicalize(path) == path
    except ServerPathFormatError:
        return False


class TestCanonicalize:
    """Tests for canonicalize on well-formed input."""

    def test_already_canonical_is_unchanged(self):
        """Canonical input comes back as the same string."""
        assert server.canonicalize("$/Project/src/main.c") == "$/Project/src/main.c"

    def test_root_shorthand(self):
        """A bare $ means the root."""
        assert server.canonicalize("$") == "$/"

    @pytest.mark.parametrize("path", ["/", "\\", "$/", "$\\", "$//", "/./"])
    def test_root_forms(self, path):
        """Every spelling of the root canonicalizes to $/."""
        assert server.canonicalize(path) == "$/"

    def test_backslashes_become_slashes(self):
        """Both separators are accepted; output uses forward slashes."""
        assert server.canonicalize("$\\Project\\src") == "$/Project/src"

    def test_missing_sigil_is_added(self):
        """A path starting with a separator gains the $ prefix."""
        assert server.canonicalize("\\Project\\src\\") == "$/Project/src"

    def test_trailing_separator_removed(self):
        assert server.canonicalize("$/Project/src/") == "$/Project/src"

    def test_empty_components_squashed(self):
        assert server.canonicalize("$//a///b") == "$/a/b"

    def test_dot_and_dotdot(self):
        """Single dots vanish and .. pops the previous component."""
        assert server.canonicalize("$/a/./b/../c") == "$/a/c"

    def test_dotdot_deeper(self):
        assert server.canonicalize("$/a/b/c/../..") == "$/a"

    def test_trailing_dots_and_spaces_stripped(self):
        """Components lose trailing dots and whitespace."""
        assert server.canonicalize("$/a. . /b.") == "$/a/b"

    def test_dot_only_component_dropped(self):
        """A component of only dots and spaces disappears."""
        assert server.canonicalize("$/.../b/. .") == "$/b"

    def test_unicode_space_separators_stripped(self):
        assert server.canonicalize("$/a\u3000/b\u2028") == "$/a/b"

    @pytest.mark.parametrize("suffix", ["\u00a0", "\u2007", "\u202f", "\u0085"])
    def test_non_breaking_spaces_kept(self, suffix):
        path = "$/a" + suffix
        assert server.canonicalize(path) == path
        assert server.is_canonical(path)

    def test_leading_space_kept(self):
        assert server.canonicalize("$/ a") == "$/ a"

    def test_dollar_inside_component_allowed(self):
        """$ is only illegal at the start of a component."""
        assert server.canonicalize("$/a$b") == "$/a$b"

    def test_case_preserved(self):
        assert server.canonicalize("$/Project/SRC") == "$/Project/SRC"

    def test_reserved_prefix_names_allowed(self):
        """Names that merely contain a device name, or COM0/LPT0, are fine."""
        assert server.canonicalize("$/con.txt/COM0/LPT0/console") == "$/con.txt/COM0/LPT0/console"

    def test_non_ascii_allowed(self):
        assert server.canonicalize("$/été/日本") == "$/été/日本"

    def test_maximum_component_length_allowed(self):
        path = "$/" + "x" * server.MAXIMUM_COMPONENT_LENGTH
        assert server.canonicalize(path) == path

    def test_semicolon_allowed(self):
        assert server.canonicalize("$/a;b") == "$/a;b"


class TestCanonicalizeErrors:
    """Tests for the error kinds raised by canonicalize."""

    def test_empty(self):
        with pytest.raises(EmptyServerPathError) as exc_info:
            server.canonicalize("")
        assert exc_info.value.kind == PathErrorKind.EMPTY

    @pytest.mark.parametrize("path", ["Project/src", "$Project", "a", "$a/b"])
    def test_not_absolute(self, path):
        with pytest.raises(NotAbsoluteServerPathError) as exc_info:
            server.canonicalize(path)
        assert exc_info.value.kind == PathErrorKind.NOT_ABSOLUTE
        assert exc_info.value.path == path

    @pytest.mark.parametrize("path", ["$/..", "$/a/..", "$/a/b/../..", "$/a/b/../../c"])
    def test_escapes_root(self, path):
        """Popping back to the bare root is an error."""
        with pytest.raises(EscapesRootError) as exc_info:
            server.canonicalize(path)
        assert exc_info.value.kind == PathErrorKind.ESCAPES_ROOT

    def test_component_too_long(self):
        component = "x" * (server.MAXIMUM_COMPONENT_LENGTH + 1)
        with pytest.raises(ComponentTooLongError) as exc_info:
            server.canonicalize("$/a/" + component)
        assert exc_info.value.component == component

    def test_component_length_measured_after_cleanup(self):
        """Trailing dots do not count towards the component limit."""
        component = "x" * server.MAXIMUM_COMPONENT_LENGTH
        assert server.canonicalize("$/" + component + "...") == "$/" + component

    @pytest.mark.parametrize("name", ["CON", "prn", "Aux", "nul", "COM1", "com9", "LPT1", "lpt9"])
    def test_reserved_names(self, name):
        with pytest.raises(ReservedNameError) as exc_info:
            server.canonicalize(f"$/Project/{name}/file")
        assert exc_info.value.component == name
        assert exc_info.value.kind == PathErrorKind.RESERVED_NAME

    def test_reserved_name_after_cleanup(self):
        """'CON.' is cleaned to 'CON' and then rejected."""
        with pytest.raises(ReservedNameError):
            server.canonicalize("$/CON.")

    @pytest.mark.parametrize("char", ['"', ":", "<", ">", "|", "*", "?"])
    def test_invalid_characters(self, char):
        with pytest.raises(InvalidCharacterError) as exc_info:
            server.canonicalize(f"$/ab{char}c")
        error = exc_info.value
        assert error.position == 4
        assert error.character == char
        assert error.code_point == ord(char)
        assert error.kind == PathErrorKind.INVALID_CHARACTER

    def test_control_character_rendered_safely(self):
        """Control characters are reported as '?' in the message and path."""
        with pytest.raises(InvalidCharacterError) as exc_info:
            server.canonicalize("$/a\x07b")
        error = exc_info.value
        assert error.position == 3
        assert error.character == "?"
        assert error.code_point == 7
        assert error.path == "$/a?b"
        assert "\x07" not in str(error)

    def test_embedded_sigil(self):
        with pytest.raises(EmbeddedSigilError) as exc_info:
            server.canonicalize("$/$b")
        assert exc_info.value.kind == PathErrorKind.EMBEDDED_SIGIL
        assert exc_info.value.path == "$/$b"

    def test_embedded_sigil_reported_after_scan(self):
        """The sigil error names the whole cleaned-up path."""
        with pytest.raises(EmbeddedSigilError) as exc_info:
            server.canonicalize("$\\a\\$b\\c\\")
        assert exc_info.value.path == "$/a/$b/c"

    def test_invalid_character_wins_over_embedded_sigil(self):
        """Invalid characters are raised immediately during the scan."""
        with pytest.raises(InvalidCharacterError):
            server.canonicalize("$/$b/c|d")

    def test_total_length(self):
        with pytest.raises(ServerPathTooLongError) as exc_info:
            server.canonicalize(LONG_PATH)
        assert exc_info.value.kind == PathErrorKind.TOO_LONG

    def test_errors_are_value_errors(self):
        """Path errors are validation errors and plain ValueErrors."""
        with pytest.raises(ValueError):
            server.canonicalize("no-root")
        with pytest.raises(TfvcValidationError):
            server.canonicalize("no-root")


class TestIsCanonical:
    """Tests for the is_canonical fast path."""

    @pytest.mark.parametrize(
        "path",
        ["$/", "$/a", "$/a/b.txt", "$/a$b", "$/ a", "$/con.txt", "$/été", "$/a;b"],
    )
    def test_canonical(self, path):
        assert server.is_canonical(path) is True

    @pytest.mark.parametrize(
        "path",
        ["", "$", "/a", "$/a/", "$/a//b", "$/./a", "$/a/..", "$/a.", "$/a ", "$/$a", "$/CON", "$/a\\b"],
    )
    def test_not_canonical(self, path):
        assert server.is_canonical(path) is False

    def test_semicolon_can_be_disallowed(self):
        assert server.is_canonical("$/a;b", allow_semicolon=False) is False
        assert server.is_canonical("$/a;b", allow_semicolon=True) is True

    def test_length_limit(self):
        assert server.is_canonical(LONG_PATH) is False

    @pytest.mark.parametrize("path", SAMPLE_PATHS)
    def test_agrees_with_canonicalize(self, path):
        """is_canonical(p) holds exactly when canonicalize(p) returns p."""
        assert server.is_canonical(path) is _canonicalizes_to_itself(path)


class TestCanonicalizeProperties:
    """Properties that hold for every accepted path."""

    @pytest.mark.parametrize("path", SAMPLE_PATHS)
    def test_idempotent(self, path):
        try:
            once = server.canonicalize(path)
        except ServerPathFormatError:
            return
        assert server.canonicalize(once) == once
        assert server.is_canonical(once)

    @pytest.mark.parametrize("path", ["$/", "$/a", "$/a/b/c"])
    def test_is_child_reflexive(self, path):
        assert server.is_child(path, path)


class TestIsChild:
    """Tests for server is_child."""

    def test_direct_child(self):
        assert server.is_child("$/a", "$/a/b")

    def test_deep_child(self):
        assert server.is_child("$/a", "$/a/b/c/d")

    def test_case_insensitive(self):
        assert server.is_child("$/Project", "$/PROJECT/src")

    def test_sibling_with_common_prefix(self):
        """A shared string prefix is not enough; a separator must follow."""
        assert not server.is_child("$/a", "$/ab")

    def test_parent_is_not_child(self):
        assert not server.is_child("$/a/b", "$/a")

    def test_everything_under_root(self):
        assert server.is_child("$/", "$/x/y")

    def test_inputs_canonicalized(self):
        assert server.is_child("\\a\\", "$/a/./b/")

    def test_malformed_input_raises(self):
        with pytest.raises(NotAbsoluteServerPathError):
            server.is_child("a", "$/a")


class TestMakeRelative:
    """Tests for server make_relative."""

    def test_child(self):
        assert server.make_relative("$/a/b", "$/a") == "b"

    def test_unrelated_path_returned_unchanged(self):
        assert server.make_relative("$/a/b", "$/x") == "$/a/b"

    def test_equal_paths(self):
        assert server.make_relative("$/a", "$/a") == ""

    def test_relative_to_root(self):
        assert server.make_relative("$/a/b", "$/") == "a/b"

    def test_case_insensitive(self):
        assert server.make_relative("$/A/b", "$/a") == "b"

    def test_prefix_without_boundary(self):
        assert server.make_relative("$/ab", "$/a") == "$/ab"


class TestMakeLocal:
    """Tests for make_local and the make_server round trip."""

    def test_maps_under_local_root(self):
        root = os.path.join(os.sep, "work", "proj")
        assert server.make_local("$/Proj/src/a.c", "$/Proj", root) == os.path.join(root, "src", "a.c")

    def test_mapping_root_itself(self):
        root = os.path.join(os.sep, "work", "proj")
        assert server.make_local("$/Proj", "$/Proj", root) == root

    def test_canonicalizes_input(self):
        root = os.path.join(os.sep, "work")
        assert server.make_local("$\\Proj\\.\\a\\", "$/Proj", root) == os.path.join(root, "a")

    def test_malformed_input_raises(self):
        with pytest.raises(EscapesRootError):
            server.make_local("$/a/..", "$/", os.sep)

    @pytest.mark.parametrize(
        "path,repo_root",
        [
            ("$/Proj", "$/Proj"),
            ("$/Proj/a", "$/Proj"),
            ("$/Proj/a/b.txt", "$/Proj"),
            ("$/Proj/x y/z", "$/Proj"),
            ("$/Proj/./a//b/", "$/Proj"),
            ("$/a/b", "$/"),
        ],
    )
    def test_round_trip(self, path, repo_root):
        """make_server undoes make_local for paths under the mapping."""
        local_root = os.path.join(os.sep, "work", "proj")
        local_path = server.make_local(path, repo_root, local_root)
        assert local.make_server(local_path, local_root, repo_root) == server.canonicalize(path)


class TestCommonAncestor:
    """Tests for common_ancestor."""

    def test_shared_parent(self):
        assert server.common_ancestor("$/a/b/c", "$/a/b/d") == "$/a/b"

    def test_nothing_shared(self):
        assert server.common_ancestor("$/a", "$/b") == "$/"

    def test_identical(self):
        assert server.common_ancestor("$/a/b", "$/a/b") == "$/a/b"

    def test_one_contains_the_other(self):
        assert server.common_ancestor("$/a", "$/a/b") == "$/a"

    def test_root(self):
        assert server.common_ancestor("$/", "$/a") == "$/"

    def test_case_sensitive(self):
        assert server.common_ancestor("$/a/b", "$/A/b") == "$/"


class TestPathHelpers:
    """Tests for the smaller server path helpers."""

    def test_is_under(self):
        assert server.is_under("$/a", "$/A/b")
        assert server.is_under("$/", "$/x")
        assert not server.is_under("$/a/b", "$/a")
        assert not server.is_under("$/a", "$/ab")

    def test_combine(self):
        assert server.combine("$/", "a") == "$/a"
        assert server.combine("$/a", "b") == "$/a/b"

    def test_get_last_component(self):
        assert server.get_last_component("$/a/b.txt") == "b.txt"
        assert server.get_last_component("$/") == ""

    def test_get_parent(self):
        assert server.get_parent("$/a/b") == "$/a"
        assert server.get_parent("$/a") == "$/"
        assert server.get_parent("$/") is None

    def test_get_path_components(self):
        assert server.get_path_components("$/a/b") == ["$", "a", "b"]

    def test_team_project(self):
        assert server.get_team_project("$/Proj/a/b") == "Proj"
        assert server.get_team_project("$/Proj") == "Proj"
        assert server.get_path_to_project("$/Proj/a/b") == "$/Proj"
        assert server.get_path_to_project("$/Proj") == "$/Proj"

    def test_compare_parent_to_child(self):
        """Parents first; at one level files come before folders."""
        items = [
            ("$/p/b", True),
            ("$/p/a.txt", False),
            ("$/p/b/c.txt", False),
            ("$/p", True),
            ("$/p/z.txt", False),
        ]
        key = functools.cmp_to_key(
            lambda x, y: server.compare_parent_to_child(x[0], x[1], y[0], y[1])
        )
        ordered = [path for path, _ in sorted(items, key=key)]
        assert ordered == ["$/p", "$/p/a.txt", "$/p/z.txt", "$/p/b", "$/p/b/c.txt"]
