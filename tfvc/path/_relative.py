"""Prefix matching shared by the server and local relative-path helpers."""

from __future__ import annotations

from collections.abc import Callable


def region_matches_ignore_case(path: str, prefix: str) -> bool:
    """Case-insensitive "starts with" test."""
    if len(path) < len(prefix):
        return False
    return path[: len(prefix)].lower() == prefix.lower()


def make_relative(path: str, relative_to: str, is_separator: Callable[[str], bool]) -> str:
    """
    Describe ``path`` relative to ``relative_to``.

    This is a literal prefix match, not a component-aware one. When the
    prefix does not match, ``path`` is returned unaltered. One separator at
    the boundary is consumed, whichever side provides it.
    """
    if region_matches_ignore_case(path, relative_to):
        if len(path) == len(relative_to):
            return ""

        if relative_to and is_separator(relative_to[-1]):
            return path[len(relative_to) :]

        if is_separator(path[len(relative_to)]):
            return path[len(relative_to) + 1 :]

    return path
