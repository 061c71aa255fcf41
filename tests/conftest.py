"""
Shared pytest fixtures for tfvc tests.

- isolate_environment: keeps user config, TFVC_* variables and the
  ~/.tfvc log file out of every test
- fake_fs: in-memory file system collaborator
- make_change: builds PendingChange records with sensible defaults
"""

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from tfvc.core.interfaces.filesystem import IFileSystem
from tfvc.core.models.changes import PendingChange
from tfvc.services.logging import TfvcLogger


class FakeFileSystem(IFileSystem):
    """File system double backed by two sets of native paths."""

    def __init__(self, files=(), directories=()) -> None:
        self.files = set(files)
        self.directories = set(directories)

    def exists(self, local_path: str) -> bool:
        return local_path in self.files or local_path in self.directories

    def is_directory(self, local_path: str) -> bool:
        return local_path in self.directories


@pytest.fixture(autouse=True)
def isolate_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run each test from an empty directory with no tfvc configuration."""
    import os

    for name in list(os.environ):
        if name.startswith("TFVC_"):
            monkeypatch.delenv(name)
    monkeypatch.setattr(TfvcLogger, "LOG_FILE_PATH", tmp_path / "logs" / "tfvc.log")

    workdir = tmp_path / "cwd"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    return workdir


@pytest.fixture
def fake_fs() -> FakeFileSystem:
    return FakeFileSystem()


@pytest.fixture
def make_change() -> Callable[..., PendingChange]:
    """Factory for pending changes; keyword arguments override defaults."""

    def _make(change_types: Any = "", **overrides: Any) -> PendingChange:
        data: dict[str, Any] = {
            "server_item": "$/Project/file.txt",
            "local_item": "/work/Project/file.txt",
            "change_types": change_types,
            "version": 7,
            "date": "2024-03-01T10:00:00",
        }
        data.update(overrides)
        return PendingChange(**data)

    return _make
