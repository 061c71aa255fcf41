"""
Local (native file system) path utilities.

Local paths are opaque native strings separated by ``os.sep``. Only the
relative algebra needed to move between the local and server namespaces is
implemented here; validating a path against the OS is the file system's job.
"""

from __future__ import annotations

import os

from . import _relative
from .naming import does_file_system_ignore_case
from .server import PREFERRED_SEPARATOR_CHARACTER, canonicalize

# TFS only understands Windows-style local paths.
TFS_PREFERRED_LOCAL_PATH_SEPARATOR = "\\"
GENERAL_LOCAL_PATH_SEPARATOR = "/"

# Prefixed to Unix paths so the server sees a drive-rooted path.
FAKE_DRIVE_PREFIX = "U:"


def _is_native_separator(c: str) -> bool:
    return c == os.sep


def combine(parent: str, relative: str) -> str:
    """
    Combine two paths with the native separator.

    If ``relative`` is absolute it is returned as is and ``parent`` is
    discarded. An empty ``relative`` yields ``parent``.
    """
    if os.path.isabs(relative):
        return relative
    if not relative:
        return parent
    return os.path.join(parent, relative)


def _fold_case(path: str) -> str:
    # normcase only lowers on Windows; macOS volumes ignore case too.
    return os.path.normcase(path).lower()


def is_child(parent_path: str, possible_child: str) -> bool:
    """
    Test whether ``possible_child`` is at or below ``parent_path``.

    Case is respected unless the platform's file system ignores it. The
    paths are not canonicalized and must be in native format.
    """
    ignore_case = does_file_system_ignore_case()
    if parent_path == possible_child or (
        ignore_case and parent_path.lower() == possible_child.lower()
    ):
        return True

    parent = _fold_case(parent_path) if ignore_case else parent_path
    parent = remove_trailing_separators(parent)

    # Walk up the possible child's ancestors looking for the parent.
    current = _fold_case(possible_child) if ignore_case else possible_child
    current = remove_trailing_separators(current)
    while True:
        ancestor = os.path.dirname(current)
        if ancestor == current or not ancestor:
            return False
        if remove_trailing_separators(ancestor) == parent:
            return True
        current = ancestor


def make_relative(local_path: str, relative_to: str) -> str:
    """
    Describe the first local path relative to the second.

    Comparison ignores case because the server forbids items that differ
    only in case inside one working folder.
    """
    return _relative.make_relative(local_path, relative_to, _is_native_separator)


def make_server(local_path: str, relative_to_local_path: str, server_root: str) -> str:
    """
    Map a local path to a server path.

    Args:
        local_path: Local path to convert
        relative_to_local_path: Parent local path of ``local_path``
        server_root: Server path corresponding to ``relative_to_local_path``

    Returns:
        The canonical server path

    Raises:
        ServerPathFormatError: The combined path is not a legal server path
            (embedded "$", reserved name, ...)
    """
    relative_part = make_relative(local_path, relative_to_local_path)
    relative_part = relative_part.replace(os.sep, PREFERRED_SEPARATOR_CHARACTER)

    if relative_part.startswith(PREFERRED_SEPARATOR_CHARACTER):
        relative_part = relative_part[1:]

    return canonicalize(server_root + PREFERRED_SEPARATOR_CHARACTER + relative_part)


def remove_trailing_separators(path: str) -> str:
    """Strip trailing native separators, keeping a lone root separator."""
    index = len(path) - 1
    while index > 0 and path[index] == os.sep:
        index -= 1
    return path[: index + 1]


def to_tfs_representation(local_path: str | None, windows: bool | None = None) -> str | None:
    """
    Convert a native path to the form TFS expects.

    On non-Windows hosts the separators become backslashes and the fake
    ``U:`` drive is prefixed.
    """
    if local_path is None:
        return None
    if windows is None:
        windows = os.name == "nt"
    local_path = local_path.replace(GENERAL_LOCAL_PATH_SEPARATOR, TFS_PREFERRED_LOCAL_PATH_SEPARATOR)
    return local_path if windows else FAKE_DRIVE_PREFIX + local_path


def from_tfs_representation(local_path: str | None, windows: bool | None = None) -> str | None:
    """
    Convert a TFS-reported local path back to native form.

    Inverse of :func:`to_tfs_representation`; the fake drive is only
    stripped on non-Windows hosts.
    """
    if local_path is None:
        return None
    if windows is None:
        windows = os.name == "nt"
    if windows:
        return local_path.replace(GENERAL_LOCAL_PATH_SEPARATOR, TFS_PREFERRED_LOCAL_PATH_SEPARATOR)

    native = local_path.replace(TFS_PREFERRED_LOCAL_PATH_SEPARATOR, GENERAL_LOCAL_PATH_SEPARATOR)
    if native.startswith(FAKE_DRIVE_PREFIX):
        native = native[len(FAKE_DRIVE_PREFIX) :]
    return native
