"""Tests for platform detection and storage information."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from backupfs.platform_info import (
    CURRENT_PLATFORM,
    NoopStorageInfo,
    PlatformStorageInfo,
    PosixStorageInfo,
    detect_platform,
)


class TestDetectPlatform:
    """Test platform selection."""

    def test_windows_gets_noop(self) -> None:
        """Windows has no space query and an .exe suffix."""
        with patch("backupfs.platform_info.os.name", "nt"):
            platform = detect_platform()
        assert isinstance(platform, NoopStorageInfo)
        assert platform.executable_suffix == ".exe"

    def test_posix_gets_statvfs(self) -> None:
        """Other platforms use statvfs and no suffix."""
        with patch("backupfs.platform_info.os.name", "posix"):
            platform = detect_platform()
        assert isinstance(platform, PosixStorageInfo)
        assert platform.executable_suffix == ""

    def test_current_platform_is_selected_once(self) -> None:
        """The module-level choice matches the running host."""
        assert isinstance(CURRENT_PLATFORM, PlatformStorageInfo)
        assert type(CURRENT_PLATFORM) is type(detect_platform())


class TestStorageInfo:
    """Test the concrete implementations."""

    def test_abstract_base_cannot_be_instantiated(self) -> None:
        """PlatformStorageInfo is abstract."""
        with pytest.raises(TypeError):
            PlatformStorageInfo()  # type: ignore[abstract]

    def test_noop_reports_unknown(self, tmp_path: Path) -> None:
        """The no-op platform never reports a size."""
        assert NoopStorageInfo().available_bytes(tmp_path) is None

    @pytest.mark.skipif(not hasattr(os, "statvfs"), reason="POSIX only")
    def test_posix_reports_statvfs_space(self, tmp_path: Path) -> None:
        """The POSIX platform matches statvfs."""
        st = os.statvfs(tmp_path)
        available = PosixStorageInfo().available_bytes(tmp_path)
        assert isinstance(available, int)
        assert available >= 0
        # Other processes may write in between; stay within 64 MiB
        assert abs(available - st.f_bavail * st.f_frsize) < 64 * 1024**2

    def test_repr(self) -> None:
        """repr names the class and platform."""
        assert repr(NoopStorageInfo()) == "NoopStorageInfo(name='windows')"
