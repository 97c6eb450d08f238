"""cybertime CLI - Cybertronian calendar calculator."""

import logging

import typer
from rich.console import Console

from cybertime import __version__
from cybertime.forms import (
    FormResult,
    add_form,
    compare_form,
    explain_form,
    from_seconds_form,
    seconds_form,
    subtract_form,
)

app = typer.Typer(
    name="cybertime",
    help="Convert between Cybertronian dates and Earth time",
    no_args_is_help=True,
)

console = Console()


def _emit(result: FormResult) -> None:
    console.print(result.output, markup=False, highlight=False)
    if not result.ok:
        raise typer.Exit(code=1)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Cybertronian calendar calculator."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(asctime)s %(name)s %(levelname)s %(message)s"
        )


@app.command()
def version() -> None:
    """Show cybertime version."""
    console.print(f"[bold]cybertime[/bold] version [cyan]{__version__}[/cyan]")


@app.command()
def explain(date: str = typer.Argument(..., help='Date such as "54 arc 4 593 arc 129"')) -> None:
    """Explain each unit of a Cybertronian date."""
    _emit(explain_form(date))


@app.command()
def compare(
    first: str = typer.Argument(..., help="First Cybertronian date"),
    second: str = typer.Argument(..., help="Second Cybertronian date"),
) -> None:
    """Show the time elapsed between two dates."""
    _emit(compare_form(first, second))


@app.command()
def add(
    date: str = typer.Argument(..., help="Cybertronian date"),
    duration: str = typer.Argument(..., help='Earth time such as "2 years, 3 weeks"'),
) -> None:
    """Add Earth time to a Cybertronian date."""
    _emit(add_form(date, duration))


@app.command()
def subtract(
    date: str = typer.Argument(..., help="Cybertronian date"),
    duration: str = typer.Argument(..., help='Earth time such as "5 days"'),
) -> None:
    """Subtract Earth time from a Cybertronian date."""
    _emit(subtract_form(date, duration))


@app.command()
def seconds(date: str = typer.Argument(..., help="Cybertronian date")) -> None:
    """Print Earth seconds since the Cybertronian origin."""
    _emit(seconds_form(date))


@app.command("from-seconds")
def from_seconds_command(
    value: float = typer.Argument(..., help="Earth seconds since the origin"),
) -> None:
    """Print the Cybertronian date for a number of Earth seconds."""
    _emit(from_seconds_form(value))


if __name__ == "__main__":
    app()
