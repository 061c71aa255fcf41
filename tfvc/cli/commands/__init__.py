"""
Click command implementations for the tfvc CLI.

Commands are registered with the main CLI group via the
register_commands() function in tfvc.cli.
"""

from .config import config
from .mappings import mappings
from .paths import ancestor, canonicalize, to_local, to_server
from .status import status

COMMANDS = [
    ancestor,
    canonicalize,
    config,
    mappings,
    status,
    to_local,
    to_server,
]

__all__ = [
    "COMMANDS",
    "ancestor",
    "canonicalize",
    "config",
    "mappings",
    "status",
    "to_local",
    "to_server",
]
