"""Command-line front end for gitconf."""

from .runner import CLIRunner

__all__ = ["CLIRunner"]
