"""CLI test fixtures and helpers for ANSI-free output checks."""

import re

import pytest
from typer.testing import CliRunner

ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")


def strip_ansi_codes(text: str) -> str:
    """Strip ANSI escape sequences from CLI output."""
    return ANSI_ESCAPE.sub("", text)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Typer test runner."""
    return CliRunner()
