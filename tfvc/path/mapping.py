"""
Workspace mappings.

A workspace is an ordered set of working folders. Translating a path picks
the most specific working folder that covers it; a cloaked working folder
hides its whole server subtree, even from broader mappings above it.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from ..core.exceptions import MappingNotFoundError
from ..core.models.mapping import WorkingFolder
from . import local, server


class WorkspaceMappings:
    """Resolves server and local paths through a set of working folders."""

    def __init__(self, folders: Iterable[WorkingFolder] = ()) -> None:
        self._folders: list[WorkingFolder] = list(folders)

    def __iter__(self) -> Iterator[WorkingFolder]:
        return iter(self._folders)

    def __len__(self) -> int:
        return len(self._folders)

    def _cloaked_below(self, folder: WorkingFolder, server_path: str) -> bool:
        """True if a cloak deeper than ``folder`` covers ``server_path``."""
        for other in self._folders:
            if (
                other.cloaked
                and len(other.server_item) > len(folder.server_item)
                and server.is_child(other.server_item, server_path)
            ):
                return True
        return False

    def find_by_server_path(self, server_path: str) -> WorkingFolder | None:
        """
        Find the working folder covering a server path.

        Returns:
            The deepest covering mapping, or None if nothing covers the path
            or the deepest covering entry is a cloak.

        Raises:
            ServerPathFormatError: If ``server_path`` is malformed
        """
        path = server.canonicalize(server_path)
        best: WorkingFolder | None = None
        for folder in self._folders:
            if server.is_child(folder.server_item, path) and (
                best is None or len(folder.server_item) > len(best.server_item)
            ):
                best = folder
        if best is None or best.cloaked:
            return None
        return best

    def find_by_local_path(self, local_path: str) -> WorkingFolder | None:
        """
        Find the working folder covering a native local path.

        Among active mappings the one with the deepest local root wins. The
        result is rejected if the path falls inside a cloaked subtree.
        """
        best: WorkingFolder | None = None
        for folder in self._folders:
            if folder.cloaked:
                continue
            if local.is_child(folder.local_item, local_path) and (
                best is None or len(folder.local_item) > len(best.local_item)
            ):
                best = folder
        if best is None:
            return None

        server_path = local.make_server(local_path, best.local_item, best.server_item)
        if self._cloaked_below(best, server_path):
            return None
        return best

    def to_local(self, server_path: str) -> str:
        """
        Map a server path to its native local path.

        Raises:
            MappingNotFoundError: If no active mapping covers the path
            ServerPathFormatError: If ``server_path`` is malformed
        """
        folder = self.find_by_server_path(server_path)
        if folder is None:
            raise MappingNotFoundError(
                f"No working folder maps {server_path}", path=server_path
            )
        return server.make_local(server_path, folder.server_item, folder.local_item)

    def to_server(self, local_path: str) -> str:
        """
        Map a native local path to its canonical server path.

        Raises:
            MappingNotFoundError: If no active mapping covers the path
        """
        folder = self.find_by_local_path(local_path)
        if folder is None:
            raise MappingNotFoundError(f"No working folder maps {local_path}", path=local_path)
        return local.make_server(local_path, folder.local_item, folder.server_item)

    def is_working_folder(self, local_path: str) -> bool:
        """True if ``local_path`` is exactly the root of an active mapping."""
        target = local.remove_trailing_separators(local_path)
        return any(not f.cloaked and f.local_item == target for f in self._folders)
