"""Preflight command verifying a backup can be written.

This module contains the PreflightCommand class which stages the
destination directory and checks that it has room for the sources.
"""

from __future__ import annotations

import logging
from pathlib import Path

from backupfs.commands.command import Command
from backupfs.config import BackupFSConfig
from backupfs.platform_info import PlatformStorageInfo
from backupfs.utils import SizeCalculator, ensure_directory, ensure_space
from backupfs.utils.format import byte_to_hr


class PreflightCommand(Command):
    """Command to check a destination before archiving the sources."""

    def __init__(
        self,
        config: BackupFSConfig,
        sources: list[str],
        destination: str,
        platform: PlatformStorageInfo | None = None,
        show_progress: bool = False,
    ) -> None:
        """Initialize PreflightCommand.

        Args:
            config (BackupFSConfig): Application configuration.
            sources (list[str]): Files or directories that will be backed up.
            destination (str): Directory the archive will be written to.
            platform: Platform implementation, defaults to the detected one.
            show_progress (bool): Show a progress bar while measuring.

        """
        self.config: BackupFSConfig = config
        self.sources: list[str] = sources
        self.destination: Path = Path(destination).expanduser()
        self.platform = platform
        self.show_progress = show_progress
        self.required_size: int | None = None
        self.logger: logging.Logger = logging.getLogger(__name__)

    def execute(self) -> bool:
        """Run the preflight checks.

        Returns:
            bool: True if the destination is ready and large enough.

        """
        if not self.sources:
            self.logger.error("No sources given. Nothing to check.")
            return False

        try:
            ensure_directory(self.destination, logger=self.logger)
            self.required_size = SizeCalculator(
                self.sources
            ).calculate_total_size(show_progress=self.show_progress)
            ensure_space(
                self.destination, self.required_size, platform=self.platform
            )
        except OSError as e:
            self.logger.error("Preflight failed: %s", e)
            return False

        self.logger.info(
            "%s has room for %s",
            self.destination,
            byte_to_hr(self.required_size),
        )
        return True
