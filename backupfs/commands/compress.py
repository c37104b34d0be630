"""Compress command producing the final gzip artifact.

This module contains the CompressCommand class which wraps
:func:`backupfs.utils.gzip_file` with the configured compression level.
"""

from __future__ import annotations

import logging
from pathlib import Path

from backupfs.commands.command import Command
from backupfs.config import BackupFSConfig
from backupfs.utils import gzip_file


class CompressCommand(Command):
    """Command to gzip a single file."""

    def __init__(
        self, config: BackupFSConfig, source: str, destination: str
    ) -> None:
        """Initialize CompressCommand.

        Args:
            config (BackupFSConfig): Application configuration.
            source (str): File to compress.
            destination (str): Output file path.

        """
        self.config: BackupFSConfig = config
        self.source: Path = Path(source).expanduser()
        self.destination: Path = Path(destination).expanduser()
        self.logger: logging.Logger = logging.getLogger(__name__)

    def execute(self) -> bool:
        """Compress the source file.

        A destination file that did not exist beforehand is removed when
        compression fails; an existing one is left as is.

        Returns:
            bool: True if compression succeeded, False otherwise.

        """
        existed = self.destination.exists()
        try:
            gzip_file(
                self.source,
                self.destination,
                compresslevel=self.config.compress_level,
                logger=self.logger,
            )
        except OSError:
            self.logger.exception("Compression of %s failed", self.source)
            if not existed and self.destination.exists():
                self._remove_partial_output()
            return False
        return True

    def _remove_partial_output(self) -> None:
        """Delete an incomplete destination file if one was created."""
        try:
            self.destination.unlink(missing_ok=True)
        except OSError as e:
            self.logger.warning(
                "Could not remove incomplete %s: %s", self.destination, e
            )
        else:
            self.logger.info("Removed incomplete %s", self.destination)
