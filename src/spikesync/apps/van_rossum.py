"""Van Rossum CLI."""

import logging
import sys
from pathlib import Path

import click
import pydantic

from spikesync.comparison import compare_trains
from spikesync.config.comparison_model import MethodEnum, VanRossumConfig
from spikesync.utils import load_spike_train, setup_logging
from spikesync.validation import InvalidInputError


@click.command()
@click.argument("train1", type=click.Path(exists=True, path_type=Path))
@click.argument("train2", type=click.Path(exists=True, path_type=Path))
@click.option("--tau", type=float, required=True, help="Timescale of the exponential kernel.")
@click.option(
    "--method",
    type=click.Choice([m.value for m in MethodEnum]),
    help="Algorithm used to calculate the distance.",
    default=MethodEnum.fast.value,
    show_default=True,
)
@click.option("-v", "--verbose", count=True, help="-v for INFO, -vv for DEBUG")
def van_rossum(train1, train2, tau, method, verbose):
    """Calculate the van Rossum distance.

    Read TRAIN1 and TRAIN2 in CSV format, and print the distance between them.

    The input files should contain a header with the column: times (or: timestamps)
    """
    loglevel = (logging.WARNING, logging.INFO, logging.DEBUG)[min(verbose, 2)]
    setup_logging(loglevel=loglevel, force=True)
    try:
        result = compare_trains(
            load_spike_train(train1),
            load_spike_train(train2),
            metric=VanRossumConfig(tau=tau, method=method),
        )
    except (InvalidInputError, pydantic.ValidationError) as ex:
        click.secho(f"Invalid input: {ex}", fg="red")
        sys.exit(1)
    click.echo(result.distance)
