"""CLI utility modules."""

from polydict.cli.utils.async_runner import dispatch_query
from polydict.cli.utils.console import console, error_console

__all__ = ["dispatch_query", "console", "error_console"]
