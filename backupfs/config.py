"""Configuration management for backupfs.

Handles loading, saving, and validation of the configuration using INI
(.conf) files. Comments are supported in the config file.
"""

from __future__ import annotations

import configparser
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path

from backupfs.logger import get_xdg_config_home

logger = logging.getLogger(__name__)

DEFAULT_COMPRESS_LEVEL = 6
MIN_COMPRESS_LEVEL = 1
MAX_COMPRESS_LEVEL = 9


def _default_config_dir() -> str:
    """Return the default configuration directory.

    Returns:
        str: ``$XDG_CONFIG_HOME/backupfs`` or ``~/.config/backupfs``.

    """
    return str(get_xdg_config_home() / "backupfs")


def _default_resampled_patterns() -> list[str]:
    """Return default patterns for resampled image variants.

    Returns:
        list[str]: Regular expressions matched against full file paths.

    """
    return [
        # SilverStripe 3 keeps variants in a _resampled folder
        r"/_resampled/",
        # SilverStripe 4 appends __<Method>Wz<base64 args> to the file name
        r"__[A-Z][A-Za-z]*Wz[A-Za-z0-9+=_-]*\.[A-Za-z0-9]+$",
    ]


@dataclass(frozen=True)
class IgnorePolicy:
    """Whether to skip resampled assets, and how to recognise them.

    Built once at startup and read-only afterwards.
    """

    enabled: bool = False
    patterns: tuple[re.Pattern[str], ...] = ()

    @classmethod
    def from_strings(
        cls, enabled: bool, patterns: list[str] | tuple[str, ...]
    ) -> IgnorePolicy:
        """Compile ``patterns`` in order into a new policy.

        Raises:
            re.error: If a pattern is not a valid regular expression.

        """
        return cls(
            enabled=enabled,
            patterns=tuple(re.compile(p) for p in patterns),
        )


@dataclass
class BackupFSConfig:
    """Configuration data for backupfs (logging, filters, compression).

    Uses INI (.conf) file for configuration, allowing comments.
    """

    config_dir: str = field(default_factory=_default_config_dir)
    log_level: str = "INFO"
    ignore_resampled: bool = False
    resampled_patterns: list[str] = field(
        default_factory=_default_resampled_patterns
    )
    compress_level: int = DEFAULT_COMPRESS_LEVEL

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        self.log_level = self._validate_log_level(self.log_level)
        self.compress_level = self._validate_compress_level(
            self.compress_level
        )

    def _validate_log_level(self, level: str) -> str:
        """Validate and normalize the log level string.

        Args:
            level (str): The log level string to validate.

        Returns:
            str: A valid log level string (uppercase).

        """
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        level_upper = level.upper()
        if level_upper not in valid_levels:
            logger.warning("Invalid log level '%s', defaulting to INFO", level)
            return "INFO"
        return level_upper

    def _validate_compress_level(self, level: int) -> int:
        """Clamp an out-of-range gzip level back to the default."""
        if not MIN_COMPRESS_LEVEL <= level <= MAX_COMPRESS_LEVEL:
            logger.warning(
                "Invalid compress level %s, defaulting to %s",
                level,
                DEFAULT_COMPRESS_LEVEL,
            )
            return DEFAULT_COMPRESS_LEVEL
        return level

    def get_log_level(self) -> int:
        """Convert the string log level to logging module constant.

        Returns:
            int: The logging level constant.

        """
        return getattr(logging, self.log_level, logging.INFO)

    @property
    def config_path(self) -> Path:
        """Return the full path to the config file (INI format)."""
        return Path(self.config_dir).expanduser() / "config.conf"

    def ignore_policy(self) -> IgnorePolicy:
        """Compile the resampled-asset settings into an IgnorePolicy.

        Raises:
            re.error: If a configured pattern is invalid.

        """
        return IgnorePolicy.from_strings(
            self.ignore_resampled, self.resampled_patterns
        )

    def save(self) -> None:
        """Save current configuration to the config file in INI format.

        Lists are saved as INI multi-line values for user-friendly editing.
        Explanatory comments are written to the config file for user guidance.
        """
        self.config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(self.config_path, "w", encoding="utf-8") as f:
            f.write("[DEFAULT]\n")

            f.write("# Logging level for the application.\n")
            f.write(
                "#   Valid levels: DEBUG, INFO, WARNING, ERROR, CRITICAL\n"
            )
            f.write(f"log_level = {self.log_level}\n\n")

            f.write("# Skip resampled image variants during backup.\n")
            f.write("#   Original images are always kept.\n")
            f.write(
                f"ignore_resampled = {str(self.ignore_resampled).lower()}\n\n"
            )

            f.write(
                "# Regular expressions identifying resampled images.\n"
            )
            f.write(
                "#   Matched anywhere in the full file path, one per line.\n"
            )
            f.write("#   Only used when ignore_resampled is true.\n")
            f.write("resampled_patterns =\n")
            f.writelines(f"\t{p}\n" for p in self.resampled_patterns)
            f.write("\n")

            f.write("# gzip compression level, 1 (fastest) to 9 (smallest).\n")
            f.write(f"compress_level = {self.compress_level}\n")

        logger.info("Configuration saved to %s", self.config_path)

    @classmethod
    def load(cls, config_dir: str | None = None) -> BackupFSConfig:
        """Load config from INI file or fall back to defaults if missing.

        Args:
            config_dir: Directory holding ``config.conf``. Defaults to the
                XDG location.

        Returns:
            BackupFSConfig: Loaded configuration.

        """
        default_config = (
            cls(config_dir=config_dir) if config_dir is not None else cls()
        )
        config_path = default_config.config_path
        if not config_path.exists():
            return default_config

        # "%" is common in regexes; disable interpolation
        parser = configparser.ConfigParser(interpolation=None)
        try:
            parser.read(config_path, encoding="utf-8")
            section = parser["DEFAULT"]

            def parse_multiline_list(val: str) -> list[str]:
                if not val:
                    return []
                return [
                    line.strip()
                    for line in val.strip().splitlines()
                    if line.strip()
                ]

            patterns = (
                parse_multiline_list(section["resampled_patterns"])
                if "resampled_patterns" in section
                else default_config.resampled_patterns
            )
            return cls(
                config_dir=default_config.config_dir,
                log_level=section.get("log_level", default_config.log_level),
                ignore_resampled=section.getboolean(
                    "ignore_resampled", default_config.ignore_resampled
                ),
                resampled_patterns=patterns,
                compress_level=section.getint(
                    "compress_level", default_config.compress_level
                ),
            )
        except (OSError, ValueError, configparser.Error):
            logger.exception("Error reading config file")
            logger.warning("Using default configuration")
            return default_config

    @classmethod
    def create_default(cls, config_dir: str | None = None) -> BackupFSConfig:
        """Create and save default configuration.

        Args:
            config_dir: Optional custom config directory.

        Returns:
            BackupFSConfig: Newly created config instance with defaults.

        """
        config = cls(config_dir=config_dir) if config_dir is not None else cls()
        config.save()
        logger.info("Created default configuration at %s", config.config_path)
        return config
