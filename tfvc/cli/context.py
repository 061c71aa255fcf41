"""
Click context extension for the tfvc CLI.

Provides TfvcContext dataclass that holds tfvc-specific data
passed through the Click command chain via ctx.obj.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from ..core.bootstrap import bootstrap
from ..core.container import ServiceContainer
from ..core.interfaces.logger import ILogger
from ..core.interfaces.presenter import IPresenter
from ..core.models.config import TfvcConfig

if TYPE_CHECKING:
    from ..path.mapping import WorkspaceMappings
    from ..status.provider import StatusProvider


@dataclass
class TfvcContext:
    """Extended context passed through Click command chain.

    Attributes:
        cwd: Current working directory
        config: Loaded configuration
        container: Services wired for this invocation
        config_file: The config file that was read, if any
    """

    cwd: Path
    config: TfvcConfig
    container: ServiceContainer
    config_file: str | None = None

    @classmethod
    def create(cls, cwd: Path | None = None, config_path: Path | None = None) -> TfvcContext:
        """Load configuration and wire services for one CLI invocation.

        Raises:
            TfvcConfigError: If the configuration is invalid
        """
        from ..core.settings import load_settings

        if cwd is None:
            cwd = Path.cwd()

        settings = load_settings(config_path=config_path, start_dir=str(cwd))
        config = settings.to_config()
        container = bootstrap(config=config)
        context = cls(
            cwd=cwd,
            config=config,
            container=container,
            config_file=settings.config_file,
        )
        if settings.config_error:
            context.logger.warning("%s", settings.config_error)
            context.presenter.print_warning(f"{settings.config_error}; using defaults")
        return context

    def close(self) -> None:
        """Release the services opened during this invocation."""
        self.container.shutdown()

    @property
    def logger(self) -> ILogger:
        return self.container.resolve(ILogger)  # type: ignore[type-abstract]

    @property
    def presenter(self) -> IPresenter:
        return self.container.resolve(IPresenter)  # type: ignore[type-abstract]

    @property
    def mappings(self) -> WorkspaceMappings:
        from ..path.mapping import WorkspaceMappings

        return self.container.resolve(WorkspaceMappings)

    @property
    def status_provider(self) -> StatusProvider:
        from ..status.provider import StatusProvider

        return self.container.resolve(StatusProvider)
