"""Unified CLI handler for standardized error handling and output."""

from collections.abc import Callable
from functools import wraps
from pathlib import Path
from typing import Any, TypeVar

import typer
from rich.console import Console
from rich.markup import escape

from scriptlens.cli.formatters.base import OutputFormat
from scriptlens.cli.formatters.json_formatter import JsonFormatter
from scriptlens.config import get_logger
from scriptlens.exceptions import ScriptLensError, ScriptLensFileNotFoundError

logger = get_logger(__name__)

T = TypeVar("T")


class CLIHandler:
    """Unified handler for CLI commands."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize CLI handler.

        Args:
            console: Rich console for output
        """
        self.console = console or Console()
        self.json_formatter = JsonFormatter()

    def handle_error(
        self, error: Exception, json_output: bool = False, exit_code: int = 1
    ) -> None:
        """Display an error and exit.

        Args:
            error: Exception to handle
            json_output: Whether to output JSON
            exit_code: Exit code to use

        Raises:
            typer.Exit: Always, with ``exit_code``
        """
        logger.error("Command failed", error=str(error), exc_info=error)

        if json_output:
            print(self.json_formatter.format_error_response(error, exit_code))
        elif isinstance(error, ScriptLensError):
            self.console.print(f"[red]Error: {escape(error.message)}[/red]")
            if error.hint:
                self.console.print(f"[yellow]Hint: {escape(error.hint)}[/yellow]")
        else:
            self.console.print(f"[red]Error: {escape(str(error))}[/red]")

        raise typer.Exit(exit_code)

    def handle_success(
        self, message: str, data: Any = None, json_output: bool = False
    ) -> None:
        """Handle success responses consistently."""
        if json_output:
            print(self.json_formatter.format_success(message, data))
        else:
            self.console.print(f"[green]{escape(message)}[/green]")

    def get_output_format(
        self,
        json: bool = False,
        csv: bool = False,
        markdown: bool = False,
        default: str | None = None,
    ) -> OutputFormat:
        """Determine output format from flags.

        Explicit flags win over the configured default.

        Args:
            json: JSON output flag
            csv: CSV output flag
            markdown: Markdown output flag
            default: Configured output format name, if any

        Returns:
            Selected output format
        """
        if json:
            return OutputFormat.JSON
        if csv:
            return OutputFormat.CSV
        if markdown:
            return OutputFormat.MARKDOWN
        if default:
            return OutputFormat(default)
        return OutputFormat.TABLE

    def read_screenplay(self, path: Path) -> str:
        """Read a screenplay file as UTF-8 text, dropping any byte-order mark.

        Raises:
            ScriptLensFileNotFoundError: If the path is missing or not a file
            ScriptLensError: If the file cannot be read or decoded
        """
        if not path.is_file():
            raise ScriptLensFileNotFoundError(
                message=f"Screenplay file not found: {path}",
                hint="Pass the path to a .fountain or plain text file",
                details={"path": str(path)},
            )
        try:
            return path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as e:
            raise ScriptLensError(
                message=f"Could not read screenplay file: {path}",
                hint="Screenplay files must be UTF-8 encoded text",
                details={"path": str(path), "error": str(e)},
            ) from e


def cli_command(func: Callable[..., T]) -> Callable[..., T]:
    """Decorator for CLI commands with standardized error handling.

    Any exception other than ``typer.Exit`` is reported through
    :class:`CLIHandler` and turned into exit code 1.
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> T:
        try:
            return func(*args, **kwargs)
        except typer.Exit:
            raise
        except Exception as e:
            CLIHandler().handle_error(e, kwargs.get("json_output", False))
            raise

    return wrapper
