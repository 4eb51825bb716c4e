"""Main CLI entry point for scriptlens."""

from __future__ import annotations

import os
from typing import Annotated

import typer
from rich.console import Console

import scriptlens
from scriptlens.cli.commands import (
    characters_command,
    parse_command,
    save_command,
    scenes_command,
    stats_command,
)
from scriptlens.cli.formatters.json_formatter import JsonFormatter
from scriptlens.config import get_logger

logger = get_logger(__name__)
console = Console()

app = typer.Typer(
    name="scriptlens",
    help="Analyze plain-text screenplays: elements, scenes and characters",
    pretty_exceptions_enable=False,
    add_completion=False,
    rich_markup_mode="rich",
)

app.command(name="parse")(parse_command)
app.command(name="scenes")(scenes_command)
app.command(name="characters")(characters_command)
app.command(name="stats")(stats_command)
app.command(name="save")(save_command)


@app.command()
def version(
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Show scriptlens version."""
    version_info = {
        "name": "scriptlens",
        "version": scriptlens.__version__,
        "description": "Structured analysis of plain-text screenplay markup",
    }

    if json_output:
        print(JsonFormatter().format(version_info))
    else:
        console.print(f"scriptlens v{version_info['version']}")


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging (INFO level)"),
    ] = False,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable debug logging"),
    ] = False,
) -> None:
    """Configure global options."""
    if not (debug or verbose):
        return

    from scriptlens.config import configure_logging, get_settings, reset_settings

    os.environ["SCRIPTLENS_LOG_LEVEL"] = "DEBUG" if debug else "INFO"
    if debug:
        os.environ["SCRIPTLENS_DEBUG"] = "true"

    reset_settings()
    configure_logging(get_settings())
    if debug:
        logger.debug("Debug mode enabled")
    else:
        logger.info("Verbose mode enabled")


def main() -> None:
    """Main CLI entry point."""
    app()


if __name__ == "__main__":
    main()
