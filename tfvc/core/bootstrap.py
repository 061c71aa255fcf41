"""
Application bootstrap for tfvc.

Builds a service container holding the configuration, logger, presenter,
file system and status provider. The logger is a resource: its log file is
closed by ``ServiceContainer.shutdown``.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from .container import ServiceContainer
from .interfaces.filesystem import IFileSystem
from .interfaces.logger import ILogger
from .interfaces.presenter import IPresenter
from .models.config import TfvcConfig


def bootstrap(
    config: TfvcConfig | None = None,
    config_path: Path | None = None,
    start_dir: str | None = None,
) -> ServiceContainer:
    """
    Build a fresh container wired with the default services.

    Args:
        config: Pre-loaded configuration; loaded from disk and environment
            when omitted
        config_path: Explicit config file (used only when config is None)
        start_dir: Directory to search for config (used only when config is None)

    Returns:
        Initialized ServiceContainer
    """
    if config is None:
        from ..config import load_config_model

        config = load_config_model(config_path=config_path, start_dir=start_dir)

    container = ServiceContainer()
    _register_core_services(container, config)
    return container


def _register_core_services(container: ServiceContainer, config: TfvcConfig) -> None:
    from ..path.mapping import WorkspaceMappings
    from ..presenters.console import ConsolePresenter
    from ..services.filesystem import LocalFileSystem
    from ..services.logging import TfvcLogger
    from ..status.provider import StatusProvider

    container.register_singleton(TfvcConfig, implementation=config)
    container.register_singleton(IPresenter, factory=ConsolePresenter)  # type: ignore[type-abstract]
    container.register_singleton(IFileSystem, factory=LocalFileSystem)  # type: ignore[type-abstract]

    def open_logger() -> Iterator[ILogger]:
        logger = TfvcLogger.from_config(config.logging)
        yield logger
        logger.close()

    container.register_resource(ILogger, open_logger)  # type: ignore[type-abstract]

    def create_mappings() -> WorkspaceMappings:
        return WorkspaceMappings(config.workspace.mappings)

    container.register_singleton(WorkspaceMappings, factory=create_mappings)

    def create_status_provider() -> StatusProvider:
        return StatusProvider(
            filesystem=container.resolve(IFileSystem),  # type: ignore[type-abstract]
            logger=container.resolve(ILogger),  # type: ignore[type-abstract]
        )

    container.register_transient(StatusProvider, create_status_provider)
