# src/speccraft/cli/__init__.py
"""CLI package for SpecCraft.

This package provides the command-line interface using Typer.
The CLI is a thin wrapper around the commands layer.
"""

from speccraft.cli.app import app, console

__all__ = ["app", "console"]
