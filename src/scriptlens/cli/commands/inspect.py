"""Read-only CLI commands: parse, scenes, characters and stats."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from scriptlens.analysis import compute_character_statistics, compute_scene_statistics
from scriptlens.cli.formatters.base import OutputFormat
from scriptlens.cli.formatters.json_formatter import JsonFormatter
from scriptlens.cli.formatters.screenplay_formatter import (
    character_rows,
    element_rows,
    scene_rows,
)
from scriptlens.cli.formatters.table_formatter import TableFormatter
from scriptlens.cli.utils.cli_handler import CLIHandler, cli_command
from scriptlens.config import get_logger, get_settings_for_cli
from scriptlens.pipeline import ScreenplayAnalysis, analyze_screenplay

logger = get_logger(__name__)
console = Console()

ScreenplayArg = Annotated[
    Path,
    typer.Argument(help="Screenplay file to analyze", dir_okay=False),
]
JsonOpt = Annotated[bool, typer.Option("--json", help="Output as JSON")]
CsvOpt = Annotated[bool, typer.Option("--csv", help="Output as CSV")]
MarkdownOpt = Annotated[bool, typer.Option("--markdown", help="Output as Markdown")]
ConfigOpt = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="Path to configuration file (YAML, TOML, or JSON)",
    ),
]


def _analyze(
    path: Path,
    config: Path | None,
    json_output: bool,
    csv: bool,
    markdown: bool,
) -> tuple[ScreenplayAnalysis, OutputFormat]:
    settings = get_settings_for_cli(config_file=config)
    handler = CLIHandler(console)
    output_format = handler.get_output_format(
        json=json_output, csv=csv, markdown=markdown, default=settings.output_format
    )
    text = handler.read_screenplay(path)
    logger.info("Analyzing screenplay", path=str(path))
    return analyze_screenplay(text), output_format


@cli_command
def parse_command(
    path: ScreenplayArg,
    json_output: JsonOpt = False,
    csv: CsvOpt = False,
    markdown: MarkdownOpt = False,
    config: ConfigOpt = None,
) -> None:
    """Show the title page and every classified element."""
    analysis, output_format = _analyze(path, config, json_output, csv, markdown)

    if output_format == OutputFormat.JSON:
        payload = {
            "titlePage": analysis.title_page,
            "elements": list(analysis.elements),
        }
        JsonFormatter(console).print(payload, output_format)
        return

    formatter = TableFormatter(console)
    if analysis.title_page and output_format == OutputFormat.TABLE:
        formatter.echo(
            formatter.create_summary_table("Title Page", analysis.title_page)
        )
    formatter.print(element_rows(analysis.elements), output_format)


@cli_command
def scenes_command(
    path: ScreenplayArg,
    json_output: JsonOpt = False,
    csv: CsvOpt = False,
    markdown: MarkdownOpt = False,
    config: ConfigOpt = None,
) -> None:
    """List scenes with location, time of day and line counts."""
    analysis, output_format = _analyze(path, config, json_output, csv, markdown)

    if output_format == OutputFormat.JSON:
        JsonFormatter(console).print(list(analysis.scenes), output_format)
        return
    TableFormatter(console).print(scene_rows(analysis.scenes), output_format)


@cli_command
def characters_command(
    path: ScreenplayArg,
    json_output: JsonOpt = False,
    csv: CsvOpt = False,
    markdown: MarkdownOpt = False,
    config: ConfigOpt = None,
) -> None:
    """List characters with dialogue and scene counts."""
    analysis, output_format = _analyze(path, config, json_output, csv, markdown)

    if output_format == OutputFormat.JSON:
        JsonFormatter(console).print(analysis.characters, output_format)
        return
    TableFormatter(console).print(character_rows(analysis.characters), output_format)


@cli_command
def stats_command(
    path: ScreenplayArg,
    json_output: JsonOpt = False,
    csv: CsvOpt = False,
    markdown: MarkdownOpt = False,
    config: ConfigOpt = None,
) -> None:
    """Summarize scene and character statistics."""
    analysis, output_format = _analyze(path, config, json_output, csv, markdown)
    scene_stats = compute_scene_statistics(analysis.scenes)
    character_stats = compute_character_statistics(analysis.characters)

    if output_format == OutputFormat.JSON:
        payload = {"scenes": scene_stats, "characters": character_stats}
        JsonFormatter(console).print(payload, output_format)
        return

    summary = {
        key: value
        for key, value in scene_stats.to_dict().items()
        if not isinstance(value, dict)
    }
    summary.update(character_stats.to_dict())
    formatter = TableFormatter(console)
    formatter.echo(
        formatter.create_summary_table("Statistics", summary, output_format),
        output_format,
    )
