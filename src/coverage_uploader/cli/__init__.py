"""Command line interface for the coverage uploader.

Usage:
    coverage-uploader detect
    coverage-uploader params --slug owner/repo --json
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer

from coverage_uploader.cli.commands import local as local_commands
from coverage_uploader.config import UploaderConfig

app = typer.Typer(
    name="coverage-uploader",
    help="Resolve commit identity for coverage uploads",
    add_completion=False,
    no_args_is_help=True,
)


@app.callback()
def callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    config_file: Path | None = typer.Option(
        None,
        "--config",
        help="Path to config.toml (default: ~/.coverage-uploader/config.toml)",
    ),
) -> None:
    """Load configuration shared by every command."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    ctx.obj = UploaderConfig(config_file)


app.command("detect")(local_commands.detect)
app.command("params")(local_commands.params)


def main():
    app()


if __name__ == "__main__":
    main()
