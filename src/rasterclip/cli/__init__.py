"""Command-line interface for rasterclip.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- line, circle and thick commands for rasterization
- clip command for batch Liang-Barsky clipping with a progress bar
- Text, JSON and PBM output files
- Verbose/quiet output modes
"""

from rasterclip.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
