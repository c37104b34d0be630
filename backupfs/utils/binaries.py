"""Locate external helper binaries on the executable search path."""

from __future__ import annotations

import logging
import os
import shutil

from backupfs.exceptions import BinaryNotFoundError
from backupfs.platform_info import CURRENT_PLATFORM, PlatformStorageInfo

logger = logging.getLogger(__name__)


def which(
    name: str,
    path: str | None = None,
    platform: PlatformStorageInfo | None = None,
) -> str:
    """Return the absolute path of executable ``name``.

    The platform's executable suffix (``.exe`` on Windows) is appended
    before searching.

    Args:
        name: Executable name, e.g. ``"tar"``.
        path: Search path in ``PATH`` format. Defaults to ``$PATH``.
        platform: Platform implementation. Defaults to the detected one.

    Returns:
        str: Absolute path to the executable.

    Raises:
        BinaryNotFoundError: If no executable with that name exists on
            the search path.

    """
    platform = platform or CURRENT_PLATFORM
    bin_name = name + platform.executable_suffix

    found = shutil.which(bin_name, path=path)
    if found is None:
        raise BinaryNotFoundError(bin_name)

    found = os.path.abspath(found)
    logger.debug("Found %s at %s", bin_name, found)
    return found
