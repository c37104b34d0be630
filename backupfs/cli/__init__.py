"""CLI module for backupfs.

This module contains the command-line interface components including
the Typer application and command orchestration logic.
"""

from backupfs.cli.parser import app

__all__ = ["app"]
