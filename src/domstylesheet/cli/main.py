"""domstylesheet CLI entry point: Click group with subcommands."""

import logging

import click

from domstylesheet import __version__


@click.group()
@click.version_option(version=__version__, prog_name="domstylesheet")
@click.option("--verbose", "-v", is_flag=True, help="Log compiler activity to stderr")
def cli(verbose: bool) -> None:
    """domstylesheet - compile nested style specs to scoped CSS."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


# Import and register subcommands
from domstylesheet.cli.compile import compile_cmd  # noqa: E402
from domstylesheet.cli.override import override_cmd  # noqa: E402

cli.add_command(compile_cmd)
cli.add_command(override_cmd)
