"""Commands that read the configuration file and print its switches."""

from __future__ import annotations

import sys
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ldc_common import FALLBACK_ENV_VAR

from ldcconf.configfile import ConfigFile

console = Console()


def _read(filename: Optional[str], exe: Optional[str]) -> ConfigFile:
    conf = ConfigFile()
    if not conf.read(exe or sys.argv[0], filename):
        typer.echo(f"Hint: switches can also be passed through ${FALLBACK_ENV_VAR}", err=True)
        raise typer.Exit(1)
    return conf


def show(
    filename: Optional[str] = typer.Option(None, help="Configuration file name (default: ldc2.conf)"),
    exe: Optional[str] = typer.Option(None, help="Path of the compiler executable"),
) -> None:
    """Show the loaded configuration file and its expanded switches."""
    conf = _read(filename, exe)

    console.print(f"[bold]Config file:[/bold] {escape(conf.path)}", highlight=False)
    if not conf.switches:
        console.print("No switches configured.")
        return

    table = Table(title="Switches")
    table.add_column("#", justify="right")
    table.add_column("Switch", style="green")
    for i, switch in enumerate(conf.switches, start=1):
        table.add_row(str(i), escape(switch))
    console.print(table)


def switches(
    filename: Optional[str] = typer.Option(None, help="Configuration file name (default: ldc2.conf)"),
    exe: Optional[str] = typer.Option(None, help="Path of the compiler executable"),
) -> None:
    """Print the expanded switches one per line."""
    conf = _read(filename, exe)
    for switch in conf.switches:
        typer.echo(switch)
