"""scriptlens command line interface."""

from scriptlens.cli.main import app, main

__all__ = ["app", "main"]
