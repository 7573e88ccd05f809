"""SPIKE CLI."""

import logging
import sys
from pathlib import Path

import click
import pydantic

from spikesync.comparison import compare_trains, dump_profile
from spikesync.config.comparison_model import SpikeConfig
from spikesync.utils import load_spike_train, setup_logging
from spikesync.validation import InvalidInputError


@click.command()
@click.argument("train1", type=click.Path(exists=True, path_type=Path))
@click.argument("train2", type=click.Path(exists=True, path_type=Path))
@click.option("--t0", type=float, help="Start time [default: one unit before the first spike]")
@click.option("--tf", type=float, help="End time [default: one unit after the last spike]")
@click.option(
    "--profile-output",
    type=click.Path(exists=False, path_type=Path),
    help="If specified, write the SPIKE profile in CSV format to this file.",
)
@click.option("-v", "--verbose", count=True, help="-v for INFO, -vv for DEBUG")
def spike(train1, train2, t0, tf, profile_output, verbose):
    """Calculate the SPIKE distance.

    Read TRAIN1 and TRAIN2 in CSV format, and print the distance between them.

    The input files should contain a header with the column: times (or: timestamps)
    """
    loglevel = (logging.WARNING, logging.INFO, logging.DEBUG)[min(verbose, 2)]
    setup_logging(loglevel=loglevel, force=True)
    try:
        result = compare_trains(
            load_spike_train(train1),
            load_spike_train(train2),
            metric=SpikeConfig(t0=t0, tf=tf),
        )
    except (InvalidInputError, pydantic.ValidationError) as ex:
        click.secho(f"Invalid input: {ex}", fg="red")
        sys.exit(1)
    if profile_output:
        dump_profile(profile_output, result.profile)
    click.echo(result.distance)
