"""Skip resampled image variants during backup traversal."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator

from backupfs.config import IgnorePolicy


class ResampledFilter:
    """Decide whether a file is a resampled asset that should be skipped.

    The filter only reads its :class:`~backupfs.config.IgnorePolicy`,
    which is immutable, so one instance can be shared freely.
    """

    def __init__(self, policy: IgnorePolicy) -> None:
        """Initialize ResampledFilter.

        Args:
            policy: Ignore toggle and compiled patterns.

        """
        self.policy = policy

    def should_skip(self, path: str | os.PathLike[str]) -> bool:
        """Return True if ``path`` is a resampled asset to leave out.

        Always False while the policy is disabled. Otherwise True as soon
        as any pattern matches anywhere in the path.
        """
        if not self.policy.enabled:
            return False
        file_path = os.fspath(path)
        return any(p.search(file_path) for p in self.policy.patterns)

    def filter(
        self, paths: Iterable[str | os.PathLike[str]]
    ) -> Iterator[str | os.PathLike[str]]:
        """Yield the paths that should be kept."""
        for path in paths:
            if not self.should_skip(path):
                yield path
