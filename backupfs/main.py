"""Main entry point for backupfs."""

from backupfs.cli import app


def main() -> None:
    """Run the Typer CLI app."""
    app()


if __name__ == "__main__":
    main()
