"""Tests for custom exceptions."""

import errno

from backupfs.exceptions import (
    BinaryNotFoundError,
    InsufficientSpaceError,
    TraversalError,
)

TWO_GB = 2147483648


class TestInsufficientSpaceError:
    """Test InsufficientSpaceError."""

    def test_message_and_attributes(self) -> None:
        """The message names the path and the required size."""
        error = InsufficientSpaceError("/var/backups", TWO_GB, 1024)
        assert error.path == "/var/backups"
        assert error.required == TWO_GB
        assert error.available == 1024
        assert str(error) == (
            "/var/backups does not have enough space available "
            "(+-2.0GiB required)"
        )

    def test_is_an_oserror(self) -> None:
        """Callers catching OSError see it, with ENOSPC."""
        error = InsufficientSpaceError("/x", 1, 0)
        assert isinstance(error, OSError)
        assert error.errno == errno.ENOSPC

    def test_small_sizes_in_bytes(self) -> None:
        """Sizes below 1 KiB are shown in bytes."""
        assert "(+-512 B required)" in str(
            InsufficientSpaceError("/x", 512, 0)
        )


class TestTraversalError:
    """Test TraversalError."""

    def test_keeps_errno_and_filename(self) -> None:
        """It behaves like the OSError it wraps."""
        error = TraversalError(errno.EACCES, "Permission denied", "/a/b")
        assert isinstance(error, OSError)
        assert error.errno == errno.EACCES
        assert error.filename == "/a/b"
        assert "Permission denied" in str(error)


class TestBinaryNotFoundError:
    """Test BinaryNotFoundError."""

    def test_message_and_name(self) -> None:
        """The searched name is kept and reported."""
        error = BinaryNotFoundError("mysqldump")
        assert error.name == "mysqldump"
        assert isinstance(error, FileNotFoundError)
        assert error.errno == errno.ENOENT
        assert str(error) == "executable file not found in $PATH: mysqldump"
