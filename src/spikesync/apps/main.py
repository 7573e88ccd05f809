"""Main CLI."""

import click

from spikesync import __version__
from spikesync.apps.run import run
from spikesync.apps.spike import spike
from spikesync.apps.validate import validate_config
from spikesync.apps.van_rossum import van_rossum


class NaturalOrderGroup(click.Group):
    """Click group preserving the order of commands."""

    def list_commands(self, ctx: click.Context) -> list[str]:
        """Return the list of possible commands."""
        return list(self.commands)


@click.group(cls=NaturalOrderGroup)
@click.version_option(__version__)
def cli():
    """The CLI entry point."""


cli.add_command(van_rossum)
cli.add_command(spike)
cli.add_command(run)
cli.add_command(validate_config)
