"""Command-line interface for strokefont.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Progress bar across the export phases
- Style overrides (weight, slant, linecap) on top of the snapshot
- Verbose/quiet output modes
- Detailed error reporting
"""

from strokefont.cli.app import cli, main

__all__ = ["cli", "main"]
