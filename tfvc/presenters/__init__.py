"""
Output presenters for the tfvc CLI.

Implements different output formats following the Strategy pattern.
"""

from .console import ConsolePresenter

__all__ = ["ConsolePresenter"]
