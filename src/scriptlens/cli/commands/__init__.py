"""scriptlens CLI commands."""

from __future__ import annotations

from scriptlens.cli.commands.inspect import (
    characters_command,
    parse_command,
    scenes_command,
    stats_command,
)
from scriptlens.cli.commands.store import save_command

__all__ = [
    "characters_command",
    "parse_command",
    "save_command",
    "scenes_command",
    "stats_command",
]
