"""backupfs package.

Filesystem and storage preflight primitives for backup tooling: path
classification, size measurement, free-space checks, gzip compression
and helper binary lookup.
"""

import tomllib
from pathlib import Path

try:
    pyproject_path = Path(__file__).parent.parent / "pyproject.toml"
    with pyproject_path.open("rb") as f:
        data = tomllib.load(f)
    __version__ = data.get("project", {}).get("version", "unknown")
except (OSError, ValueError):
    __version__ = "unknown"

from backupfs.config import BackupFSConfig, IgnorePolicy
from backupfs.exceptions import (
    BinaryNotFoundError,
    InsufficientSpaceError,
    TraversalError,
)

__all__ = [
    "BackupFSConfig",
    "BinaryNotFoundError",
    "IgnorePolicy",
    "InsufficientSpaceError",
    "TraversalError",
]
