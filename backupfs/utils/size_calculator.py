"""Recursive size measurement for files and directory trees."""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Iterable
from pathlib import Path

from tqdm import tqdm

from backupfs.exceptions import TraversalError

from .format import byte_to_hr

logger = logging.getLogger(__name__)


def _raise_traversal_error(error: OSError) -> None:
    """Turn an ``os.walk`` listing failure into a TraversalError."""
    raise TraversalError(
        error.errno, error.strerror, error.filename
    ) from error


def calculate_size(path: str | os.PathLike[str]) -> int:
    """Return the total size in bytes of every non-directory under ``path``.

    ``path`` may be a single file, in which case its own size is
    returned. Directory entries contribute nothing themselves. Symlinks
    are not followed; a link counts with its own (``lstat``) size.

    The measurement is all-or-nothing: the first entry that cannot be
    listed or statted aborts the walk and no partial size is returned.

    Args:
        path: File or directory to measure.

    Returns:
        int: Size in bytes.

    Raises:
        FileNotFoundError: If ``path`` itself does not exist.
        PermissionError: If ``path`` itself cannot be statted.
        TraversalError: If anything below ``path`` cannot be listed or
            statted.

    """
    root_stat = os.lstat(path)
    if not stat.S_ISDIR(root_stat.st_mode):
        return root_stat.st_size

    total = 0
    for root, dirs, files in os.walk(path, onerror=_raise_traversal_error):
        # os.walk puts symlinks to directories in ``dirs``; lstat sorts
        # them out and they are counted like any other link.
        for name in dirs + files:
            entry = os.path.join(root, name)
            try:
                entry_stat = os.lstat(entry)
            except OSError as e:
                raise TraversalError(e.errno, e.strerror, entry) from e
            if not stat.S_ISDIR(entry_stat.st_mode):
                total += entry_stat.st_size
    return total


class SizeCalculator:
    """Sum the sizes of several backup sources, logging a summary."""

    def __init__(self, paths: Iterable[str | os.PathLike[str]]) -> None:
        """Initialize SizeCalculator.

        Args:
            paths: Files or directories to measure. ``~`` is expanded.

        """
        self.paths: list[Path] = [Path(p).expanduser() for p in paths]

    def calculate_total_size(self, show_progress: bool = False) -> int:
        """Measure every path and return the combined size.

        Args:
            show_progress: Draw a tqdm progress bar over the paths.

        Returns:
            int: Total size in bytes.

        Raises:
            OSError: The first measurement failure, see
                :func:`calculate_size`.

        """
        total = 0
        for path in tqdm(
            self.paths,
            desc="Measuring backup sources",
            unit="path",
            disable=not show_progress,
        ):
            size = calculate_size(path)
            total += size
            logger.info("%s: %s", path, byte_to_hr(size))
        logger.info("Total size: %s", byte_to_hr(total))
        return total
