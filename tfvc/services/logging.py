"""
Diagnostic loggers.

``TfvcLogger`` routes records to a rotating file under ``~/.tfvc`` and,
when asked, to stderr. ``NullLogger`` is what library callers get when
they pass no logger.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING, Any

from ..core.interfaces.logger import ILogger

if TYPE_CHECKING:
    from ..core.models.config import LoggingConfig

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def _to_stdlib_level(level: str) -> int:
    """Unknown names fall back to warning."""
    return _LEVELS.get(level.lower(), logging.WARNING)


class TfvcLogger(ILogger):
    """
    ILogger over a named stdlib logger.

    The stdlib logger itself passes everything; each handler applies the
    configured level, so ``set_level`` only has to touch the handlers.
    Records never propagate to the root logger, which keeps the host
    application's logging configuration out of the way.
    """

    LOG_FILE_PATH = Path.home() / ".tfvc" / "tfvc.log"
    MAX_FILE_SIZE = 5 * 1024 * 1024
    BACKUP_COUNT = 3

    def __init__(
        self,
        name: str = "tfvc",
        level: str = "warning",
        console_enabled: bool = False,
        file_enabled: bool = True,
        log_file: Path | None = None,
    ) -> None:
        self._logger = logging.getLogger(name)
        self._logger.propagate = False
        self._logger.setLevel(logging.DEBUG)
        # A previous instance with the same name may still hold the log file.
        self._detach_handlers()

        self.log_file = log_file or self.LOG_FILE_PATH
        threshold = _to_stdlib_level(level)

        if console_enabled:
            self._attach(logging.StreamHandler(sys.stderr), threshold)
        if file_enabled:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)
            rotating = RotatingFileHandler(
                self.log_file,
                maxBytes=self.MAX_FILE_SIZE,
                backupCount=self.BACKUP_COUNT,
            )
            self._attach(rotating, threshold)
        if not self._logger.handlers:
            self._logger.addHandler(logging.NullHandler())

    @classmethod
    def from_config(cls, config: LoggingConfig, **kwargs: Any) -> TfvcLogger:
        """Build a logger from the ``[logging]`` config section."""
        return cls(
            level=config.level,
            console_enabled=config.console,
            file_enabled=config.file,
            **kwargs,
        )

    def _attach(self, handler: logging.Handler, threshold: int) -> None:
        handler.setLevel(threshold)
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
        self._logger.addHandler(handler)

    def _detach_handlers(self) -> None:
        for handler in list(self._logger.handlers):
            self._logger.removeHandler(handler)
            handler.close()

    def log(self, level: str, message: str, *args: Any) -> None:
        self._logger.log(_to_stdlib_level(level), message, *args)

    def set_level(self, level: str) -> None:
        threshold = _to_stdlib_level(level)
        for handler in self._logger.handlers:
            handler.setLevel(threshold)

    def close(self) -> None:
        """Flush and close the handlers; later records are dropped."""
        self._detach_handlers()
        self._logger.addHandler(logging.NullHandler())


class NullLogger(ILogger):
    """Discards everything."""

    def log(self, level: str, message: str, *args: Any) -> None:
        pass

    def set_level(self, level: str) -> None:
        pass
