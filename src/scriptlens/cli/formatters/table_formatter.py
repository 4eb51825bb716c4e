"""Table output formatter for CLI."""

import csv
import io
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from scriptlens.cli.formatters.base import OutputFormat, OutputFormatter


def _render(renderable: Any) -> str:
    string_io = io.StringIO()
    Console(file=string_io, force_terminal=True).print(renderable)
    return string_io.getvalue()


class TableFormatter(OutputFormatter[list[dict[str, Any]]]):
    """Formatter for tabular data output."""

    def format(
        self, data: list[dict[str, Any]], format_type: OutputFormat = OutputFormat.TABLE
    ) -> str:
        """Format tabular data.

        Args:
            data: List of dictionaries sharing the first row's keys
            format_type: Output format type

        Returns:
            Formatted string
        """
        if not data:
            return "No data to display"

        if format_type == OutputFormat.CSV:
            return self._format_csv(data)
        if format_type == OutputFormat.MARKDOWN:
            return self._format_markdown(data)
        return self._format_table(data)

    def _format_table(self, data: list[dict[str, Any]]) -> str:
        columns = list(data[0].keys())
        table = Table(show_header=True, header_style="bold magenta")
        for col in columns:
            table.add_column(col.replace("_", " ").title())
        for row in data:
            table.add_row(*[escape(str(row.get(col, ""))) for col in columns])
        return _render(table)

    def _format_csv(self, data: list[dict[str, Any]]) -> str:
        output = io.StringIO()
        writer = csv.DictWriter(output, fieldnames=list(data[0].keys()))
        writer.writeheader()
        writer.writerows(data)
        return output.getvalue()

    def _format_markdown(self, data: list[dict[str, Any]]) -> str:
        columns = list(data[0].keys())
        lines = [
            "| " + " | ".join(columns) + " |",
            "| " + " | ".join(["---"] * len(columns)) + " |",
        ]
        for row in data:
            cells = (str(row.get(col, "")).replace("|", "\\|") for col in columns)
            lines.append("| " + " | ".join(cells) + " |")
        return "\n".join(lines)

    def create_summary_table(
        self,
        title: str,
        data: dict[str, Any],
        format_type: OutputFormat = OutputFormat.TABLE,
    ) -> str:
        """Create a summary table from key-value pairs.

        Args:
            title: Table title
            data: Dictionary of key-value pairs
            format_type: Output format type

        Returns:
            Formatted string
        """
        if format_type == OutputFormat.TABLE:
            table = Table(title=title, show_header=False)
            table.add_column("Property", style="cyan")
            table.add_column("Value", style="white")
            for key, value in data.items():
                table.add_row(key.replace("_", " ").title(), escape(str(value)))
            return _render(table)
        rows = [{"property": key, "value": value} for key, value in data.items()]
        return self.format(rows, format_type)
