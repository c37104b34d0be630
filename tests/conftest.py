"""Shared pytest fixtures for backupfs tests.

This module contains common fixtures used across multiple test modules.
"""

import os
import sys
from collections.abc import Generator
from pathlib import Path

import pytest

# Add the parent directory to sys.path so Python can find backupfs
sys.path.insert(
    0, os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
)

from backupfs.config import BackupFSConfig, IgnorePolicy
from backupfs.platform_info import PlatformStorageInfo


class FakeStorageInfo(PlatformStorageInfo):
    """Platform double reporting a fixed amount of free space."""

    name = "fake"

    def __init__(self, available: int | None, suffix: str = "") -> None:
        self.available = available
        self.executable_suffix = suffix
        self.queried: list[str] = []

    def available_bytes(self, path: str | os.PathLike[str]) -> int | None:
        self.queried.append(os.fspath(path))
        return self.available


@pytest.fixture(autouse=True)
def isolated_xdg(
    tmp_path_factory: pytest.TempPathFactory,
    monkeypatch: pytest.MonkeyPatch,
) -> Generator[Path]:
    """Point XDG_CONFIG_HOME at a throwaway directory for every test."""
    xdg = tmp_path_factory.mktemp("xdg")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(xdg))
    yield xdg


@pytest.fixture
def test_config(tmp_path: Path) -> BackupFSConfig:
    """Create a configuration rooted in a temporary directory."""
    return BackupFSConfig(config_dir=str(tmp_path / "config"))


@pytest.fixture
def resampled_policy() -> IgnorePolicy:
    """Enabled policy with the default resampled patterns."""
    return BackupFSConfig(ignore_resampled=True).ignore_policy()


@pytest.fixture
def test_data_dir(tmp_path: Path) -> Path:
    """Create a small tree: a (10 bytes), b (20 bytes), sub/c (5 bytes)."""
    data_dir = tmp_path / "test_data"
    (data_dir / "sub").mkdir(parents=True)
    (data_dir / "a.txt").write_bytes(b"x" * 10)
    (data_dir / "b.txt").write_bytes(b"y" * 20)
    (data_dir / "sub" / "c.txt").write_bytes(b"z" * 5)
    return data_dir


@pytest.fixture
def fake_platform() -> type[FakeStorageInfo]:
    """Return the FakeStorageInfo class for building platform doubles."""
    return FakeStorageInfo
