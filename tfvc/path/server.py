"""
Repository (server) path utilities.

Server paths live in a namespace rooted at ``$/`` and use ``/`` as the
preferred separator, although ``\\`` is accepted on input. Every other
operation in this module assumes canonical input, so callers sanitize user
or server supplied text with :func:`canonicalize` first.
"""

from __future__ import annotations

import os

from ..core.exceptions import (
    ComponentTooLongError,
    EmbeddedSigilError,
    EmptyServerPathError,
    EscapesRootError,
    InvalidCharacterError,
    NotAbsoluteServerPathError,
    ReservedNameError,
    ServerPathTooLongError,
)
from . import _relative
from .naming import (
    WILDCARD_CHARACTERS,
    is_reserved_name,
    is_valid_ntfs_file_name_character,
    is_whitespace,
)

# Occasionally a path must be formatted using the root without the slash.
ROOT_NAME_ONLY = "$"

# All server paths begin with this string; the server rejects a bare "$".
ROOT = "$/"

# Accepted separators, all equivalent. Forward slash is preferred.
SEPARATOR_CHARACTERS = ("/", "\\")
PREFERRED_SEPARATOR_CHARACTER = "/"

# Maximum length of a server path, including the leading "$/".
MAX_SERVER_PATH_SIZE = 399

# Longest allowable path component.
MAXIMUM_COMPONENT_LENGTH = 256


def is_separator(c: str) -> bool:
    """Tests whether the character is one of the accepted separators."""
    return c in SEPARATOR_CHARACTERS


def is_valid_path_character(c: str) -> bool:
    """
    Tests whether the character may appear inside a path component.

    Control characters, the NTFS-invalid set and the wildcards are rejected.
    Separators are rejected here too; the scanner handles them before asking.
    """
    return is_valid_ntfs_file_name_character(c) and c not in WILDCARD_CHARACTERS


def canonicalize(server_path: str) -> str:
    """
    Return a fully rooted, canonical version of the given server path.

    Use this to sanitize user input or to expand partial paths found in
    server data. Trailing separators are stripped, except for ``$/``.

    Args:
        server_path: The repository path string to clean up

    Returns:
        The canonical path

    Raises:
        ServerPathFormatError: The path cannot be cleaned up. The concrete
            subclass names the reason.
    """
    if not server_path:
        raise EmptyServerPathError("Server path is empty", path=server_path)

    # Nearly every path seen at scale is already canonical.
    if is_canonical(server_path, allow_semicolon=True):
        return server_path

    if server_path == ROOT_NAME_ONLY:
        return ROOT

    length = len(server_path)
    position = 1 if server_path[0] == ROOT_NAME_ONLY else 0

    # The path must begin with one of: /, $/, \, $\
    if position >= length or not is_separator(server_path[position]):
        raise NotAbsoluteServerPathError(
            f"The server path {server_path} is not absolute", path=server_path
        )

    components = [ROOT_NAME_ONLY]
    current: list[str] = []
    illegal_dollar = False

    for index in range(position, length + 1):
        if index < length and not is_separator(server_path[index]):
            c = server_path[index]
            if not is_valid_path_character(c):
                raise _invalid_character(server_path, index, c)
            current.append(c)
            continue

        component = "".join(current)
        current.clear()

        if not component or component == ".":
            continue

        if component == "..":
            if len(components) <= 2:
                raise EscapesRootError(
                    f"Server path {server_path} refers to a path at or above {ROOT}",
                    path=server_path,
                )
            components.pop()
            continue

        cleaned = _cleanup_component(component)

        # Components made of nothing but dots and spaces are ignored.
        if not cleaned:
            continue

        if len(cleaned) > MAXIMUM_COMPONENT_LENGTH:
            raise ComponentTooLongError(
                f"Server path component is longer than {MAXIMUM_COMPONENT_LENGTH} characters",
                path=server_path,
                component=cleaned,
            )

        if is_reserved_name(cleaned):
            raise ReservedNameError(
                f"Server path {server_path} contains a reserved name: {cleaned}",
                path=server_path,
                component=cleaned,
            )

        # Reported once the whole path has been scanned.
        if cleaned[0] == ROOT_NAME_ONLY:
            illegal_dollar = True

        components.append(cleaned)

    if illegal_dollar:
        joined = PREFERRED_SEPARATOR_CHARACTER.join(components)
        raise EmbeddedSigilError(
            f"The path {joined} contains a $ at the beginning of a path component",
            path=joined,
        )

    if len(components) == 1:
        return ROOT

    result = PREFERRED_SEPARATOR_CHARACTER.join(components)
    if len(result) > MAX_SERVER_PATH_SIZE:
        raise ServerPathTooLongError(
            f"Server path is longer than {MAX_SERVER_PATH_SIZE} characters",
            path=result,
        )
    return result


def _cleanup_component(component: str) -> str:
    """Strip trailing dots and whitespace."""
    end = len(component)
    while end > 0 and (component[end - 1] == "." or is_whitespace(component[end - 1])):
        end -= 1
    return component[:end]


def _invalid_character(server_path: str, position: int, c: str) -> InvalidCharacterError:
    safe = "?" if ord(c) < 0x20 else c
    return InvalidCharacterError(
        f"At position {position}, the character 0x{ord(c):04x} ({safe}) "
        "is not permitted in server paths",
        path=server_path.replace(c, safe),
        position=position,
        character=safe,
        code_point=ord(c),
    )


def is_canonical(server_item: str, allow_semicolon: bool = True) -> bool:
    """
    Check whether the path is already canonical.

    Agrees exactly with :func:`canonicalize`: a path passes here if and only
    if canonicalizing it succeeds and returns it unchanged.

    Args:
        server_item: Path to inspect
        allow_semicolon: Whether ';' may appear in a component

    Returns:
        True if the path is canonical
    """
    if len(server_item) > MAX_SERVER_PATH_SIZE:
        return False

    if not server_item.startswith(ROOT):
        return False

    if len(server_item) == len(ROOT):
        return True

    if server_item[-1] == PREFERRED_SEPARATOR_CHARACTER:
        return False

    part_length = 0
    for i in range(len(ROOT), len(server_item)):
        c = server_item[i]

        if c == PREFERRED_SEPARATOR_CHARACTER:
            if not _is_canonical_part(server_item, i, part_length):
                return False
            part_length = 0
            continue

        # "$" may not lead a path part
        if part_length == 0 and c == ROOT_NAME_ONLY:
            return False

        if not is_valid_ntfs_file_name_character(c):
            return False

        if not allow_semicolon and c == ";":
            return False

        if c in WILDCARD_CHARACTERS:
            return False

        part_length += 1

    return _is_canonical_part(server_item, len(server_item), part_length)


def _is_canonical_part(server_item: str, end: int, part_length: int) -> bool:
    if part_length == 0:
        return False

    if part_length == 2 and server_item[end - 2 : end] == "..":
        return False

    # All reserved names are 3 or 4 characters long (NUL, COM1, ...)
    if part_length in (3, 4) and is_reserved_name(server_item[end - part_length : end]):
        return False

    if part_length > MAXIMUM_COMPONENT_LENGTH:
        return False

    last = server_item[end - 1]
    return not (last == "." or is_whitespace(last))


def is_child(parent_path: str, possible_child: str) -> bool:
    """
    Test whether ``possible_child`` is at or below ``parent_path``.

    Both paths are canonicalized first and case is ignored. A path is a
    child of itself, which matches Visual Studio.

    Raises:
        ServerPathFormatError: Either path is malformed
    """
    parent_path = canonicalize(parent_path)
    possible_child = canonicalize(possible_child)

    if not _relative.region_matches_ignore_case(possible_child, parent_path):
        return False

    if len(parent_path) == len(possible_child):
        return True

    # Only "$/" ends with a separator, and everything is below it.
    if is_separator(parent_path[-1]):
        return True

    return is_separator(possible_child[len(parent_path)])


def make_relative(server_path: str, relative_to: str) -> str:
    """
    Describe the first path relative to the second.

    Case is ignored, but nothing is normalized: callers must pass paths that
    can be matched literally.

    Returns:
        The relative path, ``""`` when equal, or ``server_path`` unaltered
        when it does not start with ``relative_to``
    """
    return _relative.make_relative(server_path, relative_to, is_separator)


def make_local(server_path: str, relative_to_server_path: str, local_root: str) -> str:
    """
    Map a server path to a local path.

    Args:
        server_path: Server path to convert
        relative_to_server_path: Parent server path of ``server_path``
        local_root: Local path corresponding to ``relative_to_server_path``

    Returns:
        The corresponding local path

    Raises:
        ServerPathFormatError: ``server_path`` is malformed
    """
    from .local import combine

    relative_part = make_relative(canonicalize(server_path), relative_to_server_path)

    for separator in SEPARATOR_CHARACTERS:
        relative_part = relative_part.replace(separator, os.sep)

    return combine(local_root, relative_part)


def get_path_components(server_path: str) -> list[str]:
    """Split a canonical path on the preferred separator ("$" comes first)."""
    return server_path.split(PREFERRED_SEPARATOR_CHARACTER)


def common_ancestor(path1: str, path2: str) -> str:
    """
    Return the deepest path both canonical paths live under.

    Components are compared exactly; lower-case both sides for a
    case-insensitive answer.
    """
    components1 = get_path_components(path1)
    components2 = get_path_components(path2)

    i = 0
    while i < min(len(components1), len(components2)) and components1[i] == components2[i]:
        i += 1

    if i <= 1:
        return ROOT
    return PREFERRED_SEPARATOR_CHARACTER.join(components1[:i])


def is_under(parent: str, child: str) -> bool:
    """Case-insensitive ancestor test for canonical paths."""
    parent = parent.lower()
    return parent == common_ancestor(parent, child.lower())


def combine(server_path: str, name: str) -> str:
    """Append a child name with exactly one separator."""
    if server_path.endswith(PREFERRED_SEPARATOR_CHARACTER):
        return server_path + name
    return server_path + PREFERRED_SEPARATOR_CHARACTER + name


def get_last_component(server_path: str) -> str:
    return server_path[server_path.rfind(PREFERRED_SEPARATOR_CHARACTER) + 1 :]


def get_parent(server_path: str) -> str | None:
    """Parent of a canonical path, or None for the root."""
    if server_path == ROOT:
        return None
    index = server_path.rfind(PREFERRED_SEPARATOR_CHARACTER)
    if index <= len(ROOT_NAME_ONLY):
        return ROOT
    return server_path[:index]


def get_team_project(server_path: str) -> str:
    """Name of the team project ("$/Project/a/b" -> "Project")."""
    second_slash = server_path.find(PREFERRED_SEPARATOR_CHARACTER, len(ROOT))
    end = second_slash if second_slash != -1 else len(server_path)
    return server_path[len(ROOT) : end]


def get_path_to_project(server_path: str) -> str:
    """Server path of the team project ("$/Project/a/b" -> "$/Project")."""
    second_slash = server_path.find(PREFERRED_SEPARATOR_CHARACTER, len(ROOT))
    return server_path if second_slash == -1 else server_path[:second_slash]


def _compare(a: str, b: str) -> int:
    return (a > b) - (a < b)


def compare_parent_to_child(
    path1: str,
    is_directory1: bool,
    path2: str,
    is_directory2: bool,
) -> int:
    """
    Ordering for tree display.

    Parents sort before their children, and at the same level files go
    before subfolders regardless of their names. Use with
    ``functools.cmp_to_key``.
    """
    components1 = get_path_components(path1)
    components2 = get_path_components(path2)
    min_length = min(len(components1), len(components2))

    # all levels except the last shared one
    for i in range(min_length - 1):
        if components1[i] != components2[i]:
            return _compare(components1[i], components2[i])

    if len(components1) == len(components2):
        if is_directory1 == is_directory2:
            return _compare(components1[-1], components2[-1])
        return 1 if is_directory1 else -1

    if len(components1) == min_length and not is_directory1:
        return -1
    if len(components2) == min_length and not is_directory2:
        return 1
    if components1[min_length - 1] == components2[min_length - 1]:
        return len(components1) - len(components2)
    return _compare(components1[min_length - 1], components2[min_length - 1])
