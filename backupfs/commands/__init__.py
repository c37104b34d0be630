"""Command pattern implementations for backup preparation.

This module aggregates all command classes for easy importing.
"""

from backupfs.commands.command import Command
from backupfs.commands.compress import CompressCommand
from backupfs.commands.preflight import PreflightCommand

__all__ = [
    "Command",
    "CompressCommand",
    "PreflightCommand",
]
