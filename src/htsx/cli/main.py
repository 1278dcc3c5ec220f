"""htsx CLI entry point: Click group with subcommands."""

import logging

import click

from htsx import __version__


@click.group()
@click.version_option(version=__version__, prog_name="htsx")
@click.option("-v", "--verbose", is_flag=True, help="Log every step of the conversion.")
def cli(verbose: bool) -> None:
    """htsx - compile s-expression sources to CSS and HTML."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from htsx.cli.check import check  # noqa: E402
from htsx.cli.convert import convert  # noqa: E402

cli.add_command(convert)
cli.add_command(check)
