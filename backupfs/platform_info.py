"""Platform-specific storage and executable lookup behaviour.

The free-space query and the executable suffix differ between operating
systems. Both are exposed through :class:`PlatformStorageInfo`, chosen
once at import time as :data:`CURRENT_PLATFORM`, so the rest of the
package never checks the OS itself.
"""

from __future__ import annotations

import os
from abc import ABC, abstractmethod


class PlatformStorageInfo(ABC):
    """Capabilities of the host platform used by preflight checks."""

    name: str = "abstract"
    executable_suffix: str = ""

    @abstractmethod
    def available_bytes(self, path: str | os.PathLike[str]) -> int | None:
        """Return bytes available to unprivileged users on ``path``'s filesystem.

        Returns:
            int | None: Available bytes, or None when the platform has no
            meaningful free-space query and checks should be skipped.

        """

    def __repr__(self) -> str:
        """Return a short representation for logs."""
        return f"{type(self).__name__}(name={self.name!r})"


class PosixStorageInfo(PlatformStorageInfo):
    """statvfs-backed storage information."""

    name = "posix"

    def available_bytes(self, path: str | os.PathLike[str]) -> int:
        """Return available blocks multiplied by the fragment size.

        Raises:
            OSError: If the filesystem cannot be queried.

        """
        st = os.statvfs(path)
        return st.f_bavail * st.f_frsize


class NoopStorageInfo(PlatformStorageInfo):
    """Platform without a usable free-space query (Windows)."""

    name = "windows"
    executable_suffix = ".exe"

    def available_bytes(self, path: str | os.PathLike[str]) -> None:
        """Return None; space checks always pass here."""
        return None


def detect_platform() -> PlatformStorageInfo:
    """Return the storage information implementation for this host."""
    if os.name == "nt":
        return NoopStorageInfo()
    return PosixStorageInfo()


CURRENT_PLATFORM: PlatformStorageInfo = detect_platform()
