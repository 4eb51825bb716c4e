"""Base formatter classes for CLI output."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Generic, TypeVar

from rich.console import Console
from rich.text import Text

T = TypeVar("T")


class OutputFormat(str, Enum):
    """Supported output formats."""

    TABLE = "table"
    JSON = "json"
    CSV = "csv"
    MARKDOWN = "markdown"


class OutputFormatter(ABC, Generic[T]):
    """Base class for output formatters."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize formatter.

        Args:
            console: Rich console for output. If None, creates new instance.
        """
        self.console = console or Console()

    @abstractmethod
    def format(self, data: T, format_type: OutputFormat = OutputFormat.TABLE) -> str:
        """Format data for output.

        Args:
            data: Data to format
            format_type: Output format type

        Returns:
            Formatted string
        """

    def print(self, data: T, format_type: OutputFormat = OutputFormat.TABLE) -> None:
        """Format and print data to console."""
        self.echo(self.format(data, format_type), format_type)

    def echo(self, output: str, format_type: OutputFormat = OutputFormat.TABLE) -> None:
        """Print already formatted output.

        Rendered tables are decoded back into styled text so the console can
        measure them. JSON, CSV and Markdown bypass rich so they stay free of
        markup and line wrapping.
        """
        if format_type == OutputFormat.TABLE:
            self.console.print(Text.from_ansi(output))
        else:
            print(output)
