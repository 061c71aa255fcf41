"""
User-facing output interface.

Command results go to ``print`` and ``print_table``; problems the user
should act on go to ``print_error`` and ``print_warning``.
"""

from abc import ABC, abstractmethod


class IPresenter(ABC):
    @abstractmethod
    def print(self, message: str) -> None:
        """Write one line of command output."""

    @abstractmethod
    def print_error(self, message: str) -> None:
        """Report a failure the command could not recover from."""

    @abstractmethod
    def print_warning(self, message: str) -> None:
        """Report a problem the command worked around."""

    @abstractmethod
    def print_table(self, headers: list[str], rows: list[list[str]]) -> None:
        """
        Write rows under column headers.

        Args:
            headers: Column titles
            rows: One list of cell strings per row
        """
