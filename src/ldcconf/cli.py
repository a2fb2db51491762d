"""Root Typer application for the ldcconf CLI."""

from __future__ import annotations

import typer

from ldcconf.commands import read, search
from ldcconf.log import setup_logging

app = typer.Typer(
    name="ldcconf",
    help="Locate and read the LDC compiler configuration file.",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every probed location."),
) -> None:
    setup_logging(verbose)


app.command(name="locate")(search.locate)
app.command(name="candidates")(search.candidates)
app.command(name="show")(read.show)
app.command(name="switches")(read.switches)

if __name__ == "__main__":
    app()
