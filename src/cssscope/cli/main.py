"""cssscope CLI entry point: Click group with subcommands."""

import click

from cssscope import __version__


@click.group()
@click.version_option(version=__version__, prog_name="cssscope")
def cli() -> None:
    """cssscope - namespace SCOPE blocks in CSS files and bundle them."""


# Import and register subcommands
from cssscope.cli.bundle import bundle  # noqa: E402
from cssscope.cli.scope import scope  # noqa: E402

cli.add_command(bundle)
cli.add_command(scope)
