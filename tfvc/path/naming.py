"""
File name rules shared by the server and local path modules.

TFVC stores items with NTFS naming rules regardless of the client platform,
so the checks here apply on every host.
"""

from __future__ import annotations

import sys
import unicodedata

# Characters (besides control characters) that NTFS rejects in file names.
INVALID_NTFS_FILE_NAME_CHARACTERS = frozenset('"/:<>\\|')

# Characters that are never legal in a version control path.
WILDCARD_CHARACTERS = frozenset("*?")

_RESERVED_NAMES_LENGTH3 = frozenset({"CON", "PRN", "AUX", "NUL"})
_RESERVED_PREFIXES_LENGTH4 = frozenset({"LPT", "COM"})


def is_reserved_name(name: str) -> bool:
    """
    Check if the name is a reserved NTFS device name.

    CON, PRN, AUX, NUL, COM1-COM9 and LPT1-LPT9 are reserved, compared
    case-insensitively. COM0 and LPT0 are ordinary names.
    """
    if len(name) == 4 and name[3] in "123456789":
        return name[:3].upper() in _RESERVED_PREFIXES_LENGTH4
    if len(name) == 3:
        return name.upper() in _RESERVED_NAMES_LENGTH3
    return False


def is_valid_ntfs_file_name_character(c: str) -> bool:
    """Tests whether the given character is allowed in an NTFS file name."""
    if ord(c) > 0x7F:
        return True
    if ord(c) < 0x20:
        return False
    return c not in INVALID_NTFS_FILE_NAME_CHARACTERS


# Unicode separators that still count as part of a name.
_NON_BREAKING_SPACES = frozenset("\u00a0\u2007\u202f")
_WHITESPACE_CONTROLS = frozenset("\t\n\x0b\x0c\r\x1c\x1d\x1e\x1f")


def is_whitespace(c: str) -> bool:
    """
    Whitespace as far as trailing-character rules for components go.

    Space, line and paragraph separators plus a few ASCII controls. The
    non-breaking spaces and U+0085 are ordinary characters, unlike for
    ``str.isspace``.
    """
    if c in _WHITESPACE_CONTROLS:
        return True
    return unicodedata.category(c) in ("Zs", "Zl", "Zp") and c not in _NON_BREAKING_SPACES


def does_file_system_ignore_case() -> bool:
    """
    Guess whether the local file system compares names case-insensitively.

    Windows and macOS default to case-insensitive volumes, everything else
    is treated as case-sensitive.
    """
    return sys.platform.startswith(("win", "darwin"))
