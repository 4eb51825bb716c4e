"""Shared helpers for scriptlens CLI commands."""

from scriptlens.cli.utils.cli_handler import CLIHandler, cli_command

__all__ = ["CLIHandler", "cli_command"]
