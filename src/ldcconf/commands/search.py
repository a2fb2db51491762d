"""Configuration file search commands."""

from __future__ import annotations

import sys
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ldcconf.config import get_settings
from ldcconf.services import locator
from ldcconf.services.executable import resolve_executable
from ldcconf.services.platform import current_platform

console = Console()


def locate(
    filename: Optional[str] = typer.Option(None, help="Configuration file name (default: ldc2.conf)"),
    exe: Optional[str] = typer.Option(None, help="Path of the compiler executable"),
) -> None:
    """Print the configuration file that would be loaded."""
    cfg = get_settings()
    filename = filename or cfg.config_filename
    executable = resolve_executable(exe or sys.argv[0])

    found = locator.locate(filename, executable, current_platform(cfg), cfg.install_prefix)
    if found is None:
        typer.echo(f"Error: {filename} not found in any search location", err=True)
        raise typer.Exit(1)
    typer.echo(str(found))


def candidates(
    filename: Optional[str] = typer.Option(None, help="Configuration file name (default: ldc2.conf)"),
    exe: Optional[str] = typer.Option(None, help="Path of the compiler executable"),
) -> None:
    """List every search location in priority order."""
    cfg = get_settings()
    filename = filename or cfg.config_filename
    executable = resolve_executable(exe or sys.argv[0])

    table = Table(title=f"Search order for {filename}")
    table.add_column("#", justify="right")
    table.add_column("Location", style="cyan")
    table.add_column("Path")
    table.add_column("Exists")

    paths = locator.candidate_paths(filename, executable, current_platform(cfg), cfg.install_prefix)
    for i, candidate in enumerate(paths, start=1):
        exists = "[green]yes[/green]" if candidate.path.exists() else "[dim]no[/dim]"
        table.add_row(str(i), candidate.label, escape(str(candidate.path)), exists)

    console.print(table)
