"""CLI module for backupfs.

This file contains the Typer application and CLI command handlers.
Config and logging setup live in ``backupfs.cli.runner``.
"""

from typing import Annotated

import typer

from backupfs import __version__
from backupfs.cli.runner import initialize_config
from backupfs.commands import CompressCommand, PreflightCommand
from backupfs.exceptions import BinaryNotFoundError
from backupfs.utils import (
    ResampledFilter,
    byte_to_hr,
    calculate_size,
    ensure_directory,
    ensure_space,
    which,
)

app = typer.Typer(
    name="backupfs",
    help="backupfs - filesystem and storage checks for backups",
    add_completion=False,
)


def get_version() -> str:
    """Return the application version."""
    version: str = __version__
    return version


def _version_callback(
    ctx: typer.Context, _param: typer.CallbackParam, value: bool
) -> None:
    """Typer callback to handle the global --version option.

    This callback is invoked eagerly. When the flag is present we print
    the version and exit immediately.
    """
    if not value or ctx.resilient_parsing:
        return
    typer.echo(get_version())
    raise typer.Exit


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    _show_version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            is_eager=True,
            callback=_version_callback,
            help="Show the application version",
        ),
    ] = False,
) -> None:
    """Allow a global --version option."""
    if ctx.invoked_subcommand is None:
        return


@app.command(name="version")
def version_cmd() -> None:
    """Print the installed package version."""
    typer.echo(get_version())


@app.command()
def size(
    paths: Annotated[
        list[str], typer.Argument(help="Files or directories to measure")
    ],
) -> None:
    """Print the size of each path and their total."""
    initialize_config()
    total = 0
    for path in paths:
        try:
            path_size = calculate_size(path)
        except OSError as e:
            typer.echo(f"Error: {e}")
            raise typer.Exit(1) from None
        total += path_size
        typer.echo(f"{path}: {byte_to_hr(path_size)}")
    if len(paths) > 1:
        typer.echo(f"Total: {byte_to_hr(total)}")


@app.command(name="check-space")
def check_space(
    path: Annotated[str, typer.Argument(help="Path on the filesystem to check")],
    required: Annotated[
        int, typer.Argument(min=0, help="Required size in bytes")
    ],
) -> None:
    """Check that PATH's filesystem has REQUIRED bytes available."""
    initialize_config()
    try:
        ensure_space(path, required)
    except OSError as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(1) from None
    typer.echo(f"OK: {path} has room for {byte_to_hr(required)}")


@app.command()
def mkdir(
    path: Annotated[str, typer.Argument(help="Directory to create")],
) -> None:
    """Create a directory and its parents if it does not exist."""
    initialize_config()
    try:
        ensure_directory(path)
    except OSError as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(1) from None


@app.command(name="gzip")
def gzip_cmd(
    source: Annotated[str, typer.Argument(help="File to compress")],
    dest: Annotated[str, typer.Argument(help="Output .gz file")],
) -> None:
    """Compress SOURCE into DEST with gzip."""
    config = initialize_config()
    if not CompressCommand(config, source, dest).execute():
        typer.echo(f"Error: failed to compress {source}")
        raise typer.Exit(1)
    typer.echo(f"Wrote {dest}")


@app.command(name="which")
def which_cmd(
    name: Annotated[str, typer.Argument(help="Executable name")],
) -> None:
    """Print the absolute path of an executable on PATH."""
    initialize_config()
    try:
        typer.echo(which(name))
    except BinaryNotFoundError as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(1) from None


@app.command()
def skip(
    paths: Annotated[list[str], typer.Argument(help="File paths to test")],
) -> None:
    """Show which paths the resampled-asset filter would skip."""
    config = initialize_config()
    resampled_filter = ResampledFilter(config.ignore_policy())
    for path in paths:
        verdict = "skip" if resampled_filter.should_skip(path) else "keep"
        typer.echo(f"{verdict}\t{path}")


@app.command()
def preflight(
    destination: Annotated[
        str, typer.Argument(help="Directory the backup is written to")
    ],
    sources: Annotated[
        list[str], typer.Argument(help="Files or directories to back up")
    ],
    progress: Annotated[
        bool,
        typer.Option("--progress/--no-progress", help="Show a progress bar"),
    ] = False,
) -> None:
    """Check that DESTINATION can hold a backup of SOURCES."""
    config = initialize_config()
    command = PreflightCommand(
        config, sources, destination, show_progress=progress
    )
    if not command.execute():
        typer.echo("Preflight failed, see the log for details")
        raise typer.Exit(1)
    required = command.required_size or 0
    typer.echo(f"OK: {destination} has room for {byte_to_hr(required)}")
