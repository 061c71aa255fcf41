"""
File system interface consumed by the status engine.

The engine never touches the disk directly. Existence and directory checks
go through this interface so hosts can substitute their own virtual file
system and tests can use an in-memory double.
"""

from abc import ABC, abstractmethod


class IFileSystem(ABC):
    """Interface for local file system queries."""

    @abstractmethod
    def exists(self, local_path: str) -> bool:
        """
        Check whether a local item exists.

        Args:
            local_path: Native local path

        Returns:
            True if a file or directory exists at the path
        """
        pass

    @abstractmethod
    def is_directory(self, local_path: str) -> bool:
        """
        Check whether a local item is a directory.

        Args:
            local_path: Native local path

        Returns:
            True if the path exists and is a directory
        """
        pass
