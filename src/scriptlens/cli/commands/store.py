"""CLI command that persists scenes and characters to JSON stores."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from scriptlens.cli.utils.cli_handler import CLIHandler, cli_command
from scriptlens.config import get_logger, get_settings_for_cli
from scriptlens.pipeline import analyze_screenplay
from scriptlens.storage import json_stores

logger = get_logger(__name__)
console = Console()


@cli_command
def save_command(
    path: Annotated[
        Path,
        typer.Argument(help="Screenplay file to analyze", dir_okay=False),
    ],
    store: Annotated[
        Path | None,
        typer.Option(
            "--store",
            "-s",
            help="Directory for the JSON stores (default: storage_path setting)",
            file_okay=False,
        ),
    ] = None,
    json_output: Annotated[
        bool, typer.Option("--json", help="Output as JSON")
    ] = False,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to configuration file (YAML, TOML, or JSON)",
        ),
    ] = None,
) -> None:
    """Analyze a screenplay and save its scenes and characters."""
    settings = get_settings_for_cli(
        config_file=config, cli_overrides={"storage_path": store}
    )
    handler = CLIHandler(console)
    analysis = analyze_screenplay(handler.read_screenplay(path))

    scene_store, character_store = json_stores(settings.storage_path)
    scene_result = scene_store.save(analysis.scenes)
    character_result = character_store.save(analysis.characters)
    logger.info(
        "Saved screenplay analysis",
        path=str(path),
        storage_path=str(settings.storage_path),
    )

    handler.handle_success(
        f"Saved {scene_result.count} scenes and "
        f"{character_result.count} characters to {settings.storage_path}",
        data={
            "scenes": scene_result._asdict(),
            "characters": character_result._asdict(),
        },
        json_output=json_output,
    )
