"""
Diagnostic logging interface.

Classification and mapping code reports unknown change types, unhandled
records and unreadable config files here. Anything the user is meant to
read goes through IPresenter instead.
"""

from abc import ABC, abstractmethod
from typing import Any

# Level names accepted by ``log`` and ``set_level``, lowest first.
LOG_LEVELS = ("debug", "info", "warning", "error")


class ILogger(ABC):
    """
    Sink for tfvc diagnostics.

    Implementations provide ``log`` and ``set_level``; the per-level helpers
    are shortcuts over ``log`` and take %-style arguments like stdlib logging.
    """

    @abstractmethod
    def log(self, level: str, message: str, *args: Any) -> None:
        """Record ``message % args`` at one of ``LOG_LEVELS``."""

    @abstractmethod
    def set_level(self, level: str) -> None:
        """Change the threshold below which records are dropped."""

    def debug(self, message: str, *args: Any) -> None:
        self.log("debug", message, *args)

    def info(self, message: str, *args: Any) -> None:
        self.log("info", message, *args)

    def warning(self, message: str, *args: Any) -> None:
        self.log("warning", message, *args)

    def error(self, message: str, *args: Any) -> None:
        self.log("error", message, *args)

    def close(self) -> None:
        """Release any handles held by the sink. The default holds none."""
