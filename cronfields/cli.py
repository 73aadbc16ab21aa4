"""Command-line interface for checking schedule expressions."""

from __future__ import annotations

import json
import logging

from typing import Annotated

import typer

from . import telemetry
from .errors import ScheduleError
from .parser import parse_schedule

DEFAULT_EXPRESSION = "* * * * *"

LABELS = (
    "Minutes",
    "Hours",
    "Days of the Month",
    "Months",
    "Days of the Week",
)

app = typer.Typer(
    name="cronfields",
    help="Check a numeric cron expression and list the times it matches",
    add_completion=False,
)


@app.command()
def check(
    expression: Annotated[
        str,
        typer.Argument(help="Five space separated fields, quoted as one argument"),
    ] = DEFAULT_EXPRESSION,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the parsed fields as a JSON object"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Log parse timing to stderr"),
    ] = False,
) -> None:
    """Validate EXPRESSION and print the values each field matches."""
    if verbose:
        logging.basicConfig(level=logging.INFO, format="%(message)s")
        telemetry.attach_default_logger()

    try:
        schedule = parse_schedule(expression)
    except ScheduleError as e:
        typer.echo(f"Cron Timestamp [ {expression} ] is not valid - {e}", err=True)
        raise typer.Exit(1)
    finally:
        if verbose:
            telemetry.detach_default_logger()

    if as_json:
        typer.echo(json.dumps(schedule.as_dict()))
        return

    typer.echo(
        f"Cron Timestamp of [ {expression} ] corresponds to the following times:"
    )

    for label, values in zip(LABELS, schedule):
        typer.echo(f"{label}: {list(values)}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
