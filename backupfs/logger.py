"""Logging configuration and setup for backupfs.

This module provides centralized logging configuration. It handles file
rotation, console output, and formatting consistently across the
application.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path


def get_xdg_config_home() -> Path:
    """Return the XDG config home directory path.

    Returns:
        Path: XDG config home directory or fallback to ~/.config

    """
    xdg_config_home: str | None = os.getenv("XDG_CONFIG_HOME")
    if not xdg_config_home or not Path(xdg_config_home).is_absolute():
        return Path.home() / ".config"
    return Path(xdg_config_home)


def setup_application_logging(log_level: int = logging.INFO) -> None:
    """Configure file and console logging for backupfs.

    File logs rotate under ``$XDG_CONFIG_HOME/backupfs/logs``; the console
    only shows errors.

    Args:
        log_level (int): The logging level to use. Defaults to INFO.

    """
    log_dir: Path = get_xdg_config_home() / "backupfs" / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)

    file_handler = RotatingFileHandler(
        log_dir / "backupfs.log",
        maxBytes=1024 * 1024,  # 1MB
        backupCount=3,
    )
    file_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
        )
    )
    file_handler.setLevel(log_level)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR)
    console_handler.setFormatter(logging.Formatter("%(message)s"))

    root = logging.getLogger()
    root.setLevel(log_level)

    # Remove any existing handlers to avoid duplicates
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()

    root.addHandler(file_handler)
    root.addHandler(console_handler)

    logging.getLogger(__name__).info(
        "Logging configured with %s level", logging.getLevelName(log_level)
    )


def setup_basic_logging() -> None:
    """Configure basic logging before the config file is available."""
    logging.basicConfig(level=logging.INFO)
