"""Free-space preflight check for backup destinations."""

from __future__ import annotations

import logging
import os

from backupfs.exceptions import InsufficientSpaceError
from backupfs.platform_info import CURRENT_PLATFORM, PlatformStorageInfo

from .format import byte_to_hr

logger = logging.getLogger(__name__)


def ensure_space(
    path: str | os.PathLike[str],
    required: int,
    platform: PlatformStorageInfo | None = None,
) -> None:
    """Verify that the filesystem holding ``path`` has ``required`` bytes free.

    Having exactly ``required`` bytes available is enough. The check is
    advisory: space can be consumed between this call and the write
    that follows, so write failures must still be handled.

    On platforms without a free-space query the check always passes.

    Args:
        path: Any path on the filesystem to check.
        required: Number of bytes the caller intends to write.
        platform: Platform implementation. Defaults to the detected one.

    Raises:
        ValueError: If ``required`` is negative.
        InsufficientSpaceError: If fewer than ``required`` bytes are
            available.
        OSError: If the filesystem cannot be queried.

    """
    if required < 0:
        raise ValueError(f"required size must not be negative: {required}")

    platform = platform or CURRENT_PLATFORM
    available = platform.available_bytes(path)
    if available is None:
        logger.debug(
            "Skipping free space check for %s on %s", path, platform.name
        )
        return

    logger.debug(
        "%s: %s available, %s required",
        path,
        byte_to_hr(available),
        byte_to_hr(required),
    )
    if available < required:
        raise InsufficientSpaceError(path, required, available)
