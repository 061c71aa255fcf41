"""Configuration loading and dotted-key access for tfvc."""

from pathlib import Path
from typing import Any

from .core.interfaces.logger import ILogger
from .core.models.config import TfvcConfig
from .core.settings import find_config_file, load_settings

# Keys shown by `tfvc config`
CONFIGURABLE_KEYS: dict[str, dict[str, Any]] = {
    "workspace.name": {
        "type": str,
        "default": None,
        "description": "Workspace name, informational only",
    },
    "status.max_workers": {
        "type": int,
        "default": None,
        "description": "Worker threads for batch classification (default: executor's choice)",
    },
    "status.include_unversioned": {
        "type": bool,
        "default": True,
        "description": "Report unversioned candidates in the change list",
    },
    "logging.level": {
        "type": str,
        "default": "warning",
        "description": "Log level (debug, info, warning, error)",
    },
    "logging.console": {
        "type": bool,
        "default": False,
        "description": "Output debug logs to stderr",
    },
    "logging.file": {
        "type": bool,
        "default": True,
        "description": "Output debug logs to ~/.tfvc/tfvc.log",
    },
}


def _get_nested(d: dict, key: str, default=None):
    """Get a nested key like 'logging.level'."""
    for part in key.split("."):
        if isinstance(d, dict) and part in d:
            d = d[part]
        else:
            return default
    return d


def load_config(
    config_path: Path | None = None,
    start_dir: str | None = None,
    logger: ILogger | None = None,
) -> dict:
    """
    Load configuration from file and environment.

    Args:
        config_path: Explicit path to config file
        start_dir: Directory to start searching from (if config_path not given)
        logger: Receives diagnostics about unreadable config files

    Returns:
        Configuration dict with defaults applied
    """
    settings = load_settings(config_path=config_path, start_dir=start_dir, logger=logger)
    return settings.to_dict()


def load_config_model(
    config_path: Path | None = None,
    start_dir: str | None = None,
    logger: ILogger | None = None,
) -> TfvcConfig:
    """Like load_config but returns the validated model."""
    return load_settings(config_path=config_path, start_dir=start_dir, logger=logger).to_config()


def config_get(key: str, start_dir: str | None = None, config_path: Path | None = None):
    """Get a config value by dotted key, or None when unset."""
    config = load_config(config_path=config_path, start_dir=start_dir)
    return _get_nested(config, key)


__all__ = [
    "CONFIGURABLE_KEYS",
    "config_get",
    "find_config_file",
    "load_config",
    "load_config_model",
]
