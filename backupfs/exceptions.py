"""Exceptions raised by backupfs.

Every exception here derives from :class:`OSError` so callers that only
care about "some filesystem operation failed" can keep catching
``OSError``. Missing paths and permission problems are reported with the
built-in :class:`FileNotFoundError` and :class:`PermissionError`.
"""

from __future__ import annotations

import errno
import os


class TraversalError(OSError):
    """Raised when a directory walk fails below its root.

    The walk is abandoned as soon as an entry cannot be listed or
    statted; no partial size is reported. The original ``OSError`` is
    chained as ``__cause__`` and its ``errno`` and ``filename`` are kept.

    Example:
        >>> err = TraversalError(13, "Permission denied", "/srv/a/b")
        >>> err.filename
        '/srv/a/b'
    """


class InsufficientSpaceError(OSError):
    """Raised when a filesystem cannot hold the requested number of bytes.

    Attributes:
        path (str): Path whose filesystem was checked.
        required (int): Requested size in bytes.
        available (int): Bytes available to unprivileged users.

    """

    def __init__(
        self, path: str | os.PathLike[str], required: int, available: int
    ) -> None:
        """Build the error and its human-readable message.

        Args:
            path: Path whose filesystem was checked.
            required: Requested size in bytes.
            available: Bytes available on that filesystem.

        """
        # Deferred import: backupfs.utils imports this module.
        from backupfs.utils.format import byte_to_hr

        self.path = os.fspath(path)
        self.required = required
        self.available = available
        message = (
            f"{self.path} does not have enough space available "
            f"(+-{byte_to_hr(required)} required)"
        )
        super().__init__(errno.ENOSPC, message)

    def __str__(self) -> str:
        """Return the message without the ``[Errno 28]`` prefix."""
        return str(self.strerror)


class BinaryNotFoundError(FileNotFoundError):
    """Raised when an executable cannot be found on the search path.

    Attributes:
        name (str): Executable name that was searched for, including any
            platform suffix.

    """

    def __init__(self, name: str) -> None:
        """Initialize the error with the searched executable name."""
        self.name = name
        super().__init__(
            errno.ENOENT, f"executable file not found in $PATH: {name}"
        )

    def __str__(self) -> str:
        """Return the message without the errno prefix."""
        return str(self.strerror)
