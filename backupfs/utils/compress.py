"""Streaming gzip compression of a single file."""

from __future__ import annotations

import gzip
import io
import logging
import os
import shutil

from .format import byte_to_hr
from .size_calculator import calculate_size

BUFFER_SIZE = 65536  # 64KB copy and write buffer
DEFAULT_COMPRESSLEVEL = 6


def _best_effort_size(
    path: str | os.PathLike[str], log: logging.Logger
) -> int:
    """Return the size of ``path`` or 0 when it cannot be measured."""
    try:
        return calculate_size(path)
    except OSError as e:
        log.debug("Could not measure %s: %s", path, e)
        return 0


def gzip_file(
    source: str | os.PathLike[str],
    dest: str | os.PathLike[str],
    compresslevel: int = DEFAULT_COMPRESSLEVEL,
    logger: logging.Logger | None = None,
) -> None:
    """Compress ``source`` into a gzip file at ``dest``.

    ``dest`` is created or truncated. The source is streamed through a
    gzip writer into a buffered writer on top of the destination file.
    These are closed innermost first on every exit path, so the gzip
    trailer is written before the buffer is flushed and the buffer is
    flushed before the file is closed.

    The gzip header carries no file name and a zero mtime, so the same
    input always yields the same output.

    Sizes are logged before and after compressing. Failing to measure
    them is logged at DEBUG and never affects the result.

    If an error is raised, the contents of ``dest`` are undefined and the
    file is left in place for the caller to remove. When the copy fails,
    that error is raised even if closing the writers fails as well.

    Args:
        source: File to compress.
        dest: Output path.
        compresslevel: gzip compression level, 1 (fastest) to 9 (best).
        logger: Sink for the progress lines. Defaults to the module logger.

    Raises:
        FileNotFoundError: If ``source`` does not exist or ``dest``'s
            directory is missing.
        PermissionError: If ``source`` cannot be read or ``dest`` cannot
            be written.
        OSError: If reading, compressing or writing fails.

    """
    log = logger or logging.getLogger(__name__)

    with open(source, "rb") as src, open(dest, "wb", buffering=0) as raw:
        in_size = _best_effort_size(source, log)
        log.info(
            "Compressing '%s' (%s) to '%s'",
            os.fspath(source),
            byte_to_hr(in_size),
            os.fspath(dest),
        )
        copy_error: OSError | None = None
        try:
            with (
                io.BufferedWriter(raw, buffer_size=BUFFER_SIZE) as buffered,
                gzip.GzipFile(
                    filename="",
                    mode="wb",
                    compresslevel=compresslevel,
                    fileobj=buffered,
                    mtime=0,
                ) as gz,
            ):
                try:
                    shutil.copyfileobj(src, gz, BUFFER_SIZE)
                except OSError as e:
                    copy_error = e
                    raise
        except OSError:
            # A failed copy wins over errors from closing the writers.
            if copy_error is None:
                raise
            raise copy_error from None

    out_size = _best_effort_size(dest, log)
    log.info("Wrote '%s' (%s)", os.fspath(dest), byte_to_hr(out_size))
