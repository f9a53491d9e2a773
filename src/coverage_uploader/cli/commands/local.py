"""Local git provider commands: ``detect`` and ``params``."""

from __future__ import annotations

import asyncio
import json
import os

import typer
from rich.console import Console
from rich.table import Table

from coverage_uploader.config import UploaderConfig
from coverage_uploader.errors import UploaderError
from coverage_uploader.providers.local import LocalProvider
from coverage_uploader.types import UploaderArgs, UploaderInputs

console = Console()


def _provider(ctx: typer.Context) -> LocalProvider:
    config = ctx.obj if isinstance(ctx.obj, UploaderConfig) else UploaderConfig()
    return LocalProvider(config.git_runner())


def detect(ctx: typer.Context) -> None:
    """Check whether a local git executable is usable."""
    if _provider(ctx).detect():
        console.print("[green]✓[/green] git is available")
        return
    console.print("[red]✗[/red] git is not available")
    raise typer.Exit(1)


def params(
    ctx: typer.Context,
    branch: str = typer.Option("", "--branch", "-B", help="Branch override"),
    sha: str = typer.Option("", "--sha", "-C", help="Commit SHA override"),
    pr: str = typer.Option("", "--pr", "-P", help="Pull request number"),
    slug: str = typer.Option("", "--slug", "-r", help="Repository slug override (owner/repo)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Resolve branch, commit, pr and slug from overrides, environment and git."""
    inputs = UploaderInputs(
        args=UploaderArgs(branch=branch, pr=pr, sha=sha, slug=slug),
        environment=dict(os.environ),
    )

    try:
        service_params = asyncio.run(_provider(ctx).get_service_params(inputs))
    except UploaderError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if json_output:
        print(json.dumps(service_params.to_dict(), indent=2))
        return

    table = Table(title="Service Parameters")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="bold")
    for key, value in service_params.to_dict().items():
        table.add_row(key, value or "[dim]-[/dim]")
    console.print(table)
