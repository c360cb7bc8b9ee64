"""Command-line interface for bitfont.

This module provides the CLI using Typer with rich output for
progress reporting and build summaries.
"""

from bitfont.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
