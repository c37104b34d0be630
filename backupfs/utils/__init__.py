"""Filesystem primitives used before and during a backup run."""

from .binaries import which
from .compress import gzip_file
from .format import byte_to_hr
from .paths import ensure_directory, is_dir, is_file
from .resampled import ResampledFilter
from .size_calculator import SizeCalculator, calculate_size
from .storage import ensure_space

__all__ = [
    "ResampledFilter",
    "SizeCalculator",
    "byte_to_hr",
    "calculate_size",
    "ensure_directory",
    "ensure_space",
    "gzip_file",
    "is_dir",
    "is_file",
    "which",
]
