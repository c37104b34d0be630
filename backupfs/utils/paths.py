"""Path classification and directory creation helpers."""

from __future__ import annotations

import logging
import os
import stat

StrPath = str | os.PathLike[str]


def is_file(path: StrPath) -> bool:
    """Return True if ``path`` exists and is a regular file.

    Symlinks are followed. Any error while statting the path, including
    the path not existing, yields False.
    """
    try:
        st = os.stat(path)
    except (OSError, ValueError):
        return False
    return stat.S_ISREG(st.st_mode)


def is_dir(path: StrPath) -> bool:
    """Return True if ``path`` exists and is a directory."""
    try:
        st = os.stat(path)
    except (OSError, ValueError):
        return False
    return stat.S_ISDIR(st.st_mode)


def ensure_directory(
    path: StrPath, logger: logging.Logger | None = None
) -> None:
    """Create ``path`` and any missing parents unless it is a directory.

    Nothing is logged when the directory already exists. Otherwise one
    informational line naming the path is emitted before creation.

    Args:
        path: Directory to ensure.
        logger: Sink for the progress line. Defaults to the module logger.

    Raises:
        OSError: If the directory cannot be created, e.g. permission
            denied or an existing non-directory in the way.

    """
    if is_dir(path):
        return
    log = logger or logging.getLogger(__name__)
    log.info("Creating directory '%s'", os.fspath(path))
    os.makedirs(path, mode=0o777, exist_ok=True)
