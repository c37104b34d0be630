"""CLI orchestration utilities for backupfs.

This module contains helpers for the CLI layer, mainly config and
logging initialization.
"""

from __future__ import annotations

import logging

from backupfs.config import BackupFSConfig
from backupfs.logger import (
    setup_application_logging,
    setup_basic_logging,
)

logger = logging.getLogger(__name__)


def initialize_config(config_dir: str | None = None) -> BackupFSConfig:
    """Initialize configuration and logging for the application.

    Args:
        config_dir: Optional directory holding ``config.conf``.

    Returns:
        BackupFSConfig: Loaded or newly created config instance.

    """
    config = BackupFSConfig.load(config_dir)

    if not config.config_path.exists():
        # Basic logging for initial setup
        setup_basic_logging()
        logger.info("No configuration found. Creating defaults.")
        config = BackupFSConfig.create_default(config_dir)
        logger.info("Default config created at %s", config.config_path)

    setup_application_logging(config.get_log_level())
    return config
