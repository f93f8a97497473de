"""Unterhalt-Rechner CLI — main entry point."""

from typing import Optional

import typer

from ..logging_config import setup_logging
from .commands import calc, setup, table

app = typer.Typer(
    name="ur",
    help="Kindesunterhalt für volljährige Kinder nach der Düsseldorfer Tabelle",
    rich_markup_mode="rich",
    no_args_is_help=True,
)

app.add_typer(calc.app, name="calc", help="Calculate support for a household file")
app.add_typer(table.app, name="table", help="Inspect need table editions")
app.add_typer(setup.app, name="setup", help="Interactive setup wizard")


@app.callback()
def startup(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Also write logs to this file"),
):
    """Configure logging."""
    setup_logging(verbose=verbose, log_file=log_file)


if __name__ == "__main__":
    app()
