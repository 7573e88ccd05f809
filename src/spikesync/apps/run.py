"""Run CLI."""

import logging
import sys

import click

from spikesync.comparison import run_from_file
from spikesync.validation import InvalidInputError, ValidationError


@click.command()
@click.argument("comparison_config_file", type=click.Path(exists=True))
@click.option("-v", "--verbose", count=True, help="-v for INFO, -vv for DEBUG")
def run(comparison_config_file, verbose):
    """Run the comparison."""
    loglevel = (logging.WARNING, logging.INFO, logging.DEBUG)[min(verbose, 2)]
    try:
        result = run_from_file(comparison_config_file=comparison_config_file, loglevel=loglevel)
    except ValidationError:
        click.secho("Validation failed.", fg="red")
        sys.exit(1)
    except InvalidInputError as ex:
        click.secho(f"Invalid input: {ex}", fg="red")
        sys.exit(1)
    click.echo(result.distance)
