"""
Pydantic Settings for tfvc configuration.

Provides settings loading from TOML files, environment variables, and defaults.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib

from pydantic import PrivateAttr, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from .exceptions import ConfigValidationError
from .interfaces.logger import ILogger
from .models.config import LoggingConfig, StatusConfig, TfvcConfig, WorkspaceConfig

CONFIG_DIR_NAME = ".tfvc"
CONFIG_FILE_NAME = "config.toml"


def _null_logger() -> ILogger:
    from ..services.logging import NullLogger

    return NullLogger()


def find_config_file(start_dir: str | None = None, logger: ILogger | None = None) -> Path | None:
    """
    Find .tfvc/config.toml by walking up from start_dir (or cwd).

    A pyproject.toml carrying a [tool.tfvc] table also counts.

    Returns:
        Path to config file, or None if not found.
    """
    logger = logger or _null_logger()
    start = Path(start_dir) if start_dir else Path.cwd()

    for parent in [start, *list(start.parents)]:
        config_path = parent / CONFIG_DIR_NAME / CONFIG_FILE_NAME
        if config_path.exists():
            return config_path

        pyproject = parent / "pyproject.toml"
        if pyproject.exists():
            try:
                with open(pyproject, "rb") as f:
                    data = tomllib.load(f)
                if "tool" in data and "tfvc" in data["tool"]:
                    return pyproject
            except tomllib.TOMLDecodeError as e:
                logger.debug("Failed to parse pyproject.toml at %s: %s", pyproject, e)
            except OSError as e:
                logger.debug("Failed to read pyproject.toml at %s: %s", pyproject, e)

    return None


class TomlConfigSource(PydanticBaseSettingsSource):
    """Custom settings source that loads from TOML config files."""

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        config_path: Path | None = None,
        start_dir: str | None = None,
        logger: ILogger | None = None,
    ):
        super().__init__(settings_cls)
        self._config_path = config_path
        self._start_dir = start_dir
        self._logger = logger or _null_logger()
        self._data: dict[str, Any] | None = None

    def _load_toml(self) -> dict[str, Any]:
        """Load and cache TOML data."""
        if self._data is not None:
            return self._data

        self._data = {}

        path = self._config_path
        if path is None:
            path = find_config_file(self._start_dir, self._logger)

        if path is None:
            return self._data

        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)

            if path.name == "pyproject.toml":
                data = data.get("tool", {}).get("tfvc", {})

            self._data = data
            self._data["_config_file"] = str(path)

        except tomllib.TOMLDecodeError as e:
            self._logger.warning("Failed to parse config file %s: %s", path, e)
            self._data["_config_error"] = f"Failed to parse config file: {e}"
        except OSError as e:
            self._logger.warning("Failed to read config file %s: %s", path, e)
            self._data["_config_error"] = f"Failed to read config file: {e}"

        return self._data

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Get field value from TOML data."""
        data = self._load_toml()
        return data.get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return TOML data for settings initialization, minus bookkeeping keys."""
        return {k: v for k, v in self._load_toml().items() if not k.startswith("_")}

    @property
    def config_file(self) -> str | None:
        return self._load_toml().get("_config_file")

    @property
    def config_error(self) -> str | None:
        return self._load_toml().get("_config_error")


class TfvcSettings(BaseSettings):
    """tfvc configuration settings with TOML and environment variable support.

    Priority (highest to lowest):
    1. Explicit init values
    2. Environment variables (TFVC_<section>__<field>)
    3. TOML config file (.tfvc/config.toml or pyproject.toml [tool.tfvc])
    4. Model defaults
    """

    model_config = {
        "env_prefix": "TFVC_",
        "env_nested_delimiter": "__",
        "extra": "ignore",
    }

    workspace: WorkspaceConfig = WorkspaceConfig()
    status: StatusConfig = StatusConfig()
    logging: LoggingConfig = LoggingConfig()

    _config_file: str | None = PrivateAttr(default=None)
    _config_error: str | None = PrivateAttr(default=None)

    @property
    def config_file(self) -> str | None:
        return self._config_file

    @property
    def config_error(self) -> str | None:
        return self._config_error

    def to_config(self) -> TfvcConfig:
        """Detach the plain configuration model from the settings sources."""
        return TfvcConfig(
            workspace=self.workspace,
            status=self.status,
            logging=self.logging,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert settings to a plain dict."""
        result: dict[str, Any] = {
            "workspace": self.workspace.model_dump(),
            "status": self.status.model_dump(),
            "logging": self.logging.model_dump(),
        }
        if self._config_file:
            result["_config_file"] = self._config_file
        if self._config_error:
            result["_config_error"] = self._config_error
        return result


def _bind_sources(toml_source: TomlConfigSource) -> type[TfvcSettings]:
    """
    Build a settings class whose TOML source is the given one.

    ``settings_customise_sources`` is a classmethod with no access to
    constructor arguments, so the source is bound through a per-call subclass.
    """

    class BoundTfvcSettings(TfvcSettings):
        @classmethod
        def settings_customise_sources(
            cls,
            settings_cls: type[BaseSettings],
            init_settings: PydanticBaseSettingsSource,
            env_settings: PydanticBaseSettingsSource,
            dotenv_settings: PydanticBaseSettingsSource,
            file_secret_settings: PydanticBaseSettingsSource,
        ) -> tuple[PydanticBaseSettingsSource, ...]:
            return (init_settings, env_settings, toml_source)

    return BoundTfvcSettings


def load_settings(
    config_path: Path | None = None,
    start_dir: str | None = None,
    logger: ILogger | None = None,
    **overrides: Any,
) -> TfvcSettings:
    """Load tfvc settings from config file and environment.

    Args:
        config_path: Explicit path to config file
        start_dir: Directory to start searching from (if config_path not given)
        logger: Receives diagnostics about unreadable config files
        **overrides: Explicit section values, highest priority

    Returns:
        TfvcSettings instance with all sources merged

    Raises:
        ConfigValidationError: If a configured value fails validation
    """
    toml_source = TomlConfigSource(TfvcSettings, config_path, start_dir, logger)
    settings_cls = _bind_sources(toml_source)

    try:
        settings = settings_cls(**overrides)
    except ValidationError as e:
        first = e.errors()[0]
        key = ".".join(str(part) for part in first["loc"])
        raise ConfigValidationError(
            f"Invalid configuration: {first['msg']}",
            key=key,
            context={"config_file": toml_source.config_file} if toml_source.config_file else None,
            cause=e,
        ) from e

    settings._config_file = toml_source.config_file
    settings._config_error = toml_source.config_error
    return settings
