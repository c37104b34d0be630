"""Tests for the resampled asset filter and its policy."""

import re
from pathlib import Path

import pytest
from hypothesis import given
from hypothesis import strategies as st

from backupfs.config import IgnorePolicy
from backupfs.utils.resampled import ResampledFilter

RESAMPLED_PATHS = [
    "assets/Uploads/_resampled/SetWidth300-photo.jpg",
    "/var/www/assets/_resampled/FillWzEwMCwxMDBd/photo.jpg",
    "assets/Uploads/photo__FillWzEwMCwxMDBd.jpg",
    "assets/Gallery/banner__ScaleWidthWzgwMF0.png",
]
ORIGINAL_PATHS = [
    "assets/Uploads/photo.jpg",
    "assets/Uploads/my__notes.txt",
    "assets/resampled/photo.jpg",
    "assets/Uploads/_resampled.jpg",
    "assets/Uploads/photo__BigWave.jpg",
]


class TestResampledFilter:
    """Test ResampledFilter.should_skip."""

    @pytest.mark.parametrize("path", RESAMPLED_PATHS + ORIGINAL_PATHS)
    def test_disabled_never_skips(self, path: str) -> None:
        """With the toggle off nothing is skipped, even matching paths."""
        policy = IgnorePolicy.from_strings(False, [r".*"])
        assert ResampledFilter(policy).should_skip(path) is False

    @pytest.mark.parametrize("path", RESAMPLED_PATHS)
    def test_enabled_skips_resampled(
        self, resampled_policy: IgnorePolicy, path: str
    ) -> None:
        """Default patterns recognise resampled variants."""
        assert ResampledFilter(resampled_policy).should_skip(path) is True

    @pytest.mark.parametrize("path", ORIGINAL_PATHS)
    def test_enabled_keeps_originals(
        self, resampled_policy: IgnorePolicy, path: str
    ) -> None:
        """Originals are kept."""
        assert ResampledFilter(resampled_policy).should_skip(path) is False

    def test_any_pattern_matches(self) -> None:
        """A match by any one pattern is enough."""
        policy = IgnorePolicy.from_strings(True, [r"\.tmp$", r"/cache/"])
        resampled_filter = ResampledFilter(policy)
        assert resampled_filter.should_skip("a/b.tmp") is True
        assert resampled_filter.should_skip("a/cache/b.txt") is True
        assert resampled_filter.should_skip("a/b.txt") is False

    def test_pattern_matches_anywhere(self) -> None:
        """Patterns are searched, not anchored at the start."""
        policy = IgnorePolicy.from_strings(True, ["resampled"])
        assert ResampledFilter(policy).should_skip("x/y/resampled/z")

    def test_enabled_without_patterns_keeps_everything(self) -> None:
        """An empty pattern set never matches."""
        policy = IgnorePolicy(enabled=True)
        assert ResampledFilter(policy).should_skip("anything") is False

    def test_accepts_path_objects(
        self, resampled_policy: IgnorePolicy
    ) -> None:
        """os.PathLike inputs work like strings."""
        path = Path("assets/Uploads/_resampled/photo.jpg")
        assert ResampledFilter(resampled_policy).should_skip(path) is True

    def test_filter_yields_kept_paths(
        self, resampled_policy: IgnorePolicy
    ) -> None:
        """filter() drops skipped paths and keeps order."""
        paths = [ORIGINAL_PATHS[0], RESAMPLED_PATHS[0], ORIGINAL_PATHS[1]]
        kept = list(ResampledFilter(resampled_policy).filter(paths))
        assert kept == [ORIGINAL_PATHS[0], ORIGINAL_PATHS[1]]

    @given(st.text())
    def test_disabled_property(self, path: str) -> None:
        """No input is ever skipped while disabled."""
        policy = IgnorePolicy.from_strings(False, [r".*", r"^$"])
        assert ResampledFilter(policy).should_skip(path) is False

    @given(st.text(alphabet="abc/._"))
    def test_enabled_matches_regex_search(self, path: str) -> None:
        """Skipping agrees with a plain regex search."""
        policy = IgnorePolicy.from_strings(True, [r"a/b", r"\.c$"])
        expected = bool(re.search(r"a/b", path) or re.search(r"\.c$", path))
        assert ResampledFilter(policy).should_skip(path) is expected


class TestIgnorePolicy:
    """Test IgnorePolicy construction."""

    def test_default_is_disabled(self) -> None:
        """A bare policy skips nothing."""
        policy = IgnorePolicy()
        assert policy.enabled is False
        assert policy.patterns == ()

    def test_patterns_keep_their_order(self) -> None:
        """Compiled patterns are kept in configuration order."""
        policy = IgnorePolicy.from_strings(True, ["b", "a", "c"])
        assert [p.pattern for p in policy.patterns] == ["b", "a", "c"]

    def test_is_immutable(self) -> None:
        """Policies cannot be changed after construction."""
        policy = IgnorePolicy.from_strings(True, ["x"])
        with pytest.raises(AttributeError):
            policy.enabled = False  # type: ignore[misc]

    def test_invalid_pattern_fails_at_construction(self) -> None:
        """Bad regexes are reported when the policy is built."""
        with pytest.raises(re.error):
            IgnorePolicy.from_strings(True, ["(unclosed"])
