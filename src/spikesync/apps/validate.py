"""Validate CLI."""

import sys

import click

from spikesync import validation
from spikesync.utils import load_yaml


@click.command()
@click.argument("comparison_config_file", type=click.Path(exists=True))
def validate_config(comparison_config_file):
    """Validate a configuration file."""
    comparison_config = load_yaml(comparison_config_file)
    try:
        validation.validate_config(
            comparison_config, schema=validation.read_schema("comparison_config")
        )
    except validation.ValidationError:
        click.secho("Validation failed.", fg="red")
        sys.exit(1)
    else:
        click.secho("Validation successful.", fg="green")
