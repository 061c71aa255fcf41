"""Local disk implementation of the file system collaborator."""

import os

from ..core.interfaces.filesystem import IFileSystem


class LocalFileSystem(IFileSystem):
    """Answers existence queries against the real local disk."""

    def exists(self, local_path: str) -> bool:
        return os.path.lexists(local_path)

    def is_directory(self, local_path: str) -> bool:
        return os.path.isdir(local_path)
