"""Output formatters for the scriptlens CLI."""

from scriptlens.cli.formatters.base import OutputFormat, OutputFormatter
from scriptlens.cli.formatters.json_formatter import JsonFormatter
from scriptlens.cli.formatters.table_formatter import TableFormatter

__all__ = ["JsonFormatter", "OutputFormat", "OutputFormatter", "TableFormatter"]
